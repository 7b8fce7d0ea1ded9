"""Terminal output helpers: colored text and character-by-character printing."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from enum import Enum
from typing import IO


class Color(Enum):
    """ANSI escape sequences for the colors the program uses."""

    RED = "\x1b[91m"
    GREEN = "\x1b[92m"
    RESET = "\x1b[0m"


class Console:
    """Writes messages to a text stream, optionally in color or progressively."""

    def __init__(self, stream: IO[str] | None = None, delay_scale: float = 1.0):
        self.stream = stream if stream is not None else sys.stdout
        self.delay_scale = delay_scale

    def write_colored(self, message: str, color: Color) -> None:
        """Write a message in the given color, then restore the default."""
        self.stream.write(f"{color.value}{message}{Color.RESET.value}")
        self.stream.flush()

    def _type_out(self, message: str, delay_ms: float) -> None:
        pause = delay_ms * self.delay_scale / 1000.0
        for char in message:
            self.stream.write(char)
            self.stream.flush()
            if pause > 0:
                time.sleep(pause)

    def progressive(self, message: str, delay_ms: float) -> None:
        """Write a message one character at a time, followed by a newline."""
        self._type_out(message, delay_ms)
        self.stream.write("\n")
        self.stream.flush()

    def progressive_colored(self, message: str, color: Color, delay_ms: float) -> None:
        """Like progressive(), in the given color."""
        self.stream.write(color.value)
        self._type_out(message, delay_ms)
        self.stream.write(Color.RESET.value + "\n")
        self.stream.flush()


def clear_screen() -> int:
    """Clear the terminal; returns the exit status of the clear command."""
    command = "cls" if os.name == "nt" else "clear"
    return subprocess.run(command, shell=True, check=False).returncode