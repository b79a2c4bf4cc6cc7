# csopesy

An interactive command-line shell. It prints a coloured banner, recognises a
fixed set of operating-system-style commands and lets you open named process
screens.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running the emulator

```
csopesy
```

The emulator clears the terminal, prints its banner and reads commands at a
`> ` prompt:

| Command            | Effect                                                   |
|--------------------|----------------------------------------------------------|
| `initialize`       | Acknowledges the command                                 |
| `screen`           | Acknowledges the command                                 |
| `screen -s NAME`   | Creates the screen named `NAME` if it is new, and opens it |
| `screen -r NAME`   | Reopens an existing screen; reports if none exists       |
| `scheduler-test`   | Acknowledges the command                                 |
| `scheduler-stop`   | Acknowledges the command                                 |
| `report-util`      | Acknowledges the command                                 |
| `clear`            | Clears the terminal and prints the banner again          |
| `exit`             | Leaves the program                                       |

`screen -s` with no name reports the missing name. An empty line does nothing;
anything else is reported as an unknown command. The program also stops at the
end of its input.

Opening a screen clears the terminal and shows the screen's process name, its
instruction line (`1 / 10`) and the local time it was created. Inside a screen
the only command is `exit`, which returns to the main menu and shows the banner
again; anything else prints a reminder of that.

## Running the simple shell

```
csopesy-shell
```

A simpler loop with a `>` prompt. It acknowledges `initialize`, `screen`,
`scheduler-test`, `scheduler-stop` and `report-util`, clears the terminal and
reprints the banner on `clear`, says `Goodbye!` and stops on `exit`, and reports
anything else as not recognized. It has no screens.

## Using it from Python

```python
import io
from csopesy.emulator import Emulator

out = io.StringIO()
emulator = Emulator(stdout=out, clear=lambda: None)
emulator.handle("screen -s worker")   # opens the screen "worker"
emulator.handle("exit")               # back to the main menu
print(out.getvalue())
```

`Emulator.handle()` returns `False` once `exit` is given in the main menu and
`True` otherwise; `Emulator.run()` reads lines from a stream until then.
`csopesy.shell.respond()` returns the simple shell's reply to one command.

`csopesy.screen_info.ScreenInfo` holds a screen's details and
`ScreenInfo.render()` returns the text shown for it;
`csopesy.screen_info.current_timestamp()` formats a creation time.
`csopesy.banner.header_text()` returns the coloured banner and
`csopesy.banner.clear_terminal()` runs the platform's clear command.

## What it does not do

The scheduler, initialisation and report commands only acknowledge that they
were typed: no processes are created or scheduled, and nothing is measured or
reported. A screen records a name and a creation time, but it runs no
instructions, so its instruction line never moves from `1 / 10`. Screens live
only as long as the program runs.