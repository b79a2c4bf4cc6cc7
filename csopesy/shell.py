"""The plain command loop: recognises commands and echoes them back."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from csopesy.banner import clear_terminal, header_text

_KNOWN_COMMANDS = (
    "initialize",
    "screen",
    "scheduler-test",
    "scheduler-stop",
    "report-util",
)


def respond(command: str) -> str | None:
    """Return the reply to ``command``, or None for 'clear', which has none."""
    if command == "clear":
        return None
    if command in _KNOWN_COMMANDS:
        return f"'{command}' command recognized. Doing something.\n"
    if command == "exit":
        return "Goodbye!\n"
    return f"'{command}' command not recognized. Please try again.\n"


def run_shell(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    clear: Callable[[], None] | None = None,
) -> int:
    """Run the command loop until 'exit' or end of input; return the exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    clear = clear if clear is not None else clear_terminal

    stdout.write(header_text())
    while True:
        stdout.write(">")
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            return 0
        command = raw.rstrip("\n")
        reply = respond(command)
        if reply is None:
            clear()
            stdout.write(header_text())
        else:
            stdout.write(reply)
        if command == "exit":
            return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the command loop on the standard streams."""
    return run_shell()


if __name__ == "__main__":
    raise SystemExit(main())