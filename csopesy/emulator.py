"""The main-menu emulator with named process screens."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from csopesy.banner import clear_terminal, header_text
from csopesy.screen_info import ScreenInfo

_PLACEHOLDER_COMMANDS = (
    "initialize",
    "screen",
    "scheduler-test",
    "scheduler-stop",
    "report-util",
)
_CREATE_PREFIX = "screen -s "
_RESUME_PREFIX = "screen -r "


class Emulator:
    """Command interpreter that switches between the main menu and screens."""

    def __init__(
        self,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else clear_terminal
        self.screens: dict[str, ScreenInfo] = {}
        self.in_screen = False
        self.current_screen = ""

    def _say(self, text: str) -> None:
        self.stdout.write(text)

    def clear_screen(self) -> None:
        """Clear the terminal and, in the main menu, show the banner."""
        self._clear()
        if not self.in_screen:
            self._say(header_text())

    def draw_screen(self, name: str) -> None:
        """Enter the screen called ``name``, creating it if it is new."""
        self.clear_screen()
        self.in_screen = True
        self.current_screen = name
        info = self.screens.setdefault(name, ScreenInfo(name))
        self._say(info.render())

    def handle_screen_command(self, line: str) -> bool:
        """Handle a line typed inside a screen; always keeps running."""
        if line == "exit":
            self.in_screen = False
            self.current_screen = ""
            self.clear_screen()
        else:
            self._say("Unknown screen command. Type 'exit' to return to main menu.\n")
        return True

    def handle_main_command(self, line: str) -> bool:
        """Handle a main-menu line; return False once the program should stop."""
        if line in _PLACEHOLDER_COMMANDS:
            self._say(f"{line} command recognized. Doing something.\n")
        elif line.startswith(_CREATE_PREFIX):
            name = line[len(_CREATE_PREFIX):]
            if name:
                self.draw_screen(name)
            else:
                self._say("Missing process name after 'screen -s'\n")
        elif line.startswith(_RESUME_PREFIX):
            name = line[len(_RESUME_PREFIX):]
            if name in self.screens:
                self.draw_screen(name)
            else:
                self._say(f"No screen named '{name}' found.\n")
        elif line == "clear":
            self.clear_screen()
        elif line == "exit":
            self._say("exit command recognized. Exiting program.\n")
            return False
        elif line:
            self._say(f"Unknown command: {line}\n")
        return True

    def handle(self, line: str) -> bool:
        """Dispatch a line to the screen or the main menu."""
        if self.in_screen:
            return self.handle_screen_command(line)
        return self.handle_main_command(line)

    def run(self, stdin: TextIO | None = None) -> int:
        """Read commands until 'exit' or end of input; return the exit status."""
        stdin = stdin if stdin is not None else sys.stdin
        self.clear_screen()
        while True:
            self._say("> ")
            self.stdout.flush()
            raw = stdin.readline()
            if not raw:
                return 0
            if not self.handle(raw.rstrip("\n")):
                return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the emulator on the standard streams."""
    return Emulator().run()


if __name__ == "__main__":
    raise SystemExit(main())