"""The coloured start-up banner and terminal clearing."""

from __future__ import annotations

import os
import subprocess

_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"
_RESET = "\033[0m"

_ART = (
    r"        ___           ___           ___                         ___           ___                   ",
    r"       /  /\         /  /\         /  /\          ___          /  /\         /  /\          __      ",
    r"      /  /::\       /  /::\       /  /::\        /  /\        /  /::\       /  /::\        |  |\    ",
    r"     /  /:/\:\     /__/:/\:\     /  /:/\:\      /  /::\      /  /:/\:\     /__/:/\:\       |  |:|   ",
    r"    /  /:/  \:\   _\_ \:\ \:\   /  /:/  \:\    /  /:/\:\    /  /::\ \:\   _\_ \:\ \:\      |  |:|   ",
    r"   /__/:/ \  \:\ /__/\ \:\:\:\ /__/:/ \__\:\  /  /::\ \:\  /__/:/\:\ \:\ /__/\ \:\:\:\     |__|:|__ ",
    r"   \  \:\  \__\/ \  \:\ \:\_\/ \  \:\ /  /:/ /__/:/\:\_\:\ \  \:\ \:\_\/ \  \:\ \:\_\/     /  /::::"
    + "\\",
    r"    \  \:\        \  \:\_\:\    \  \:\  /:/  \__\/  \:\/:/  \  \:\ \:\    \  \:\_\:\      /  /:/~~~~",
    r"     \  \:\        \  \:\/:/     \  \:\/:/        \  \::/    \  \:\_\/     \  \:\/:/     /__/:/     ",
    r"      \  \:\        \  \::/       \  \::/          \__\/      \  \:\        \  \::/      \__\/      ",
    r"       \__\/         \__\/         \__\/                       \__\/         \__\/                   ",
)

_CLEAR_COMMAND = "cls" if os.name == "nt" else "clear"


def header_text() -> str:
    """Return the banner, with its colour codes, as printed at start-up."""
    art = "".join(f"{line}\n" for line in _ART)
    return (
        f"{_GREEN}{art}"
        f"{_YELLOW}Hello, welcome to CSOPESY commandline!{_RESET}\n"
        f"{_CYAN}Type 'exit' to quit, 'clear' to clear the screen.{_RESET}\n"
    )


def clear_terminal() -> None:
    """Clear the terminal with the platform's clear command."""
    subprocess.run(_CLEAR_COMMAND, shell=True, check=False)