"""Interactive command-line shell with a banner, commands and named process screens."""

__version__ = "0.1.0"
__all__ = ["banner", "emulator", "screen_info", "shell"]