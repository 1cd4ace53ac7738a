"""extcommands CLI"""

from .commands_cmd import app, main

__all__ = ["app", "main"]
