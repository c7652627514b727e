"""Keyboard input and screen output for the interactive console."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from enum import Enum
from typing import IO, Union

__all__ = ["Key", "Terminal", "ListCursor", "highlight", "HIGHLIGHT", "RESET"]

HIGHLIGHT = "\033[38;5;0;48;5;15m"
RESET = "\x1b[0m"
_HOME = "\033[0;0H"
_CLEAR = "\033[2J\033[H"
_PAUSE_TEXT = "Nacisnij dowolny klawisz, aby kontynuowac . . .\n"


class Key(Enum):
    """Special keys the console reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"


KeyPress = Union[Key, str]

_CONTROL_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x08": Key.BACKSPACE,
    "\x7f": Key.BACKSPACE,
    "\x1b": Key.ESC,
}
_WINDOWS_ARROWS = {"H": Key.UP, "P": Key.DOWN, "K": Key.LEFT, "M": Key.RIGHT}
_ANSI_ARROWS = {"A": Key.UP, "B": Key.DOWN, "D": Key.LEFT, "C": Key.RIGHT}


def _translate(char: str) -> KeyPress:
    if char == "\x03":
        raise KeyboardInterrupt
    return _CONTROL_KEYS.get(char, char)


def highlight(text: str, selected: bool) -> str:
    """Wrap a list entry, inverting its colours when it is selected."""
    return f"{HIGHLIGHT if selected else ''}{text}{RESET}"


class Terminal:
    """Console streams plus single-key reading.

    When ``keys`` is given, key presses are taken from it instead of the
    keyboard; plain characters in it are translated like typed ones.
    """

    def __init__(
        self,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        keys: Iterable[KeyPress] | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._keys = iter(keys) if keys is not None else None

    def read_key(self) -> KeyPress:
        """Wait for one key press; raises EOFError when input is exhausted."""
        if self._keys is not None:
            try:
                key = next(self._keys)
            except StopIteration:
                raise EOFError("no more key presses") from None
            return _translate(key) if isinstance(key, str) else key
        if sys.platform == "win32":
            return self._read_windows()
        return self._read_posix()

    @staticmethod
    def _read_windows() -> KeyPress:
        import msvcrt

        while True:
            char = msvcrt.getwch()
            if char in ("\x00", "\xe0"):
                key = _WINDOWS_ARROWS.get(msvcrt.getwch())
                if key is not None:
                    return key
                continue
            return _translate(char)

    def _read_posix(self) -> KeyPress:
        import select
        import termios
        import tty

        fd = self.stdin.fileno()
        saved = termios.tcgetattr(fd)

        def read_char() -> str:
            data = os.read(fd, 1)
            if not data:
                raise EOFError("end of input")
            return data.decode(errors="replace")

        try:
            tty.setraw(fd)
            while True:
                char = read_char()
                if char != "\x1b":
                    return _translate(char)
                ready, _, _ = select.select([fd], [], [], 0.05)
                if not ready:
                    return Key.ESC
                if read_char() not in ("[", "O"):
                    return Key.ESC
                key = _ANSI_ARROWS.get(read_char())
                if key is not None:
                    return key
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def write(self, text: str) -> None:
        """Write text and flush it to the screen."""
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self) -> None:
        """Clear the screen."""
        self.write(_CLEAR)

    def home(self) -> None:
        """Move the cursor to the top left corner."""
        self.write(_HOME)

    def prompt(self, text: str) -> str:
        """Show a prompt and read one line; raises EOFError at end of input."""
        self.write(text)
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def prompt_int(self, text: str) -> int | None:
        """Read a whole number; anything else gives None."""
        try:
            return int(self.prompt(text).strip())
        except ValueError:
            return None

    def pause(self) -> None:
        """Wait for any key."""
        self.write(_PAUSE_TEXT)
        self.read_key()


class ListCursor:
    """Selection and scrolling window over a list shown a page at a time."""

    def __init__(self, size: int, page: int = 10) -> None:
        self.page = page
        self.reset(size)

    def reset(self, size: int) -> None:
        """Start over at the top of a list of ``size`` entries."""
        self.size = size
        self.selected = 0
        self.start = 0
        self.stop = min(self.page, size)

    def move_up(self) -> None:
        """Select the previous entry, scrolling when near the top."""
        if self.selected:
            self.selected -= 1
            if self.selected - self.start < 1 and self.start > 0:
                self.start -= 1
                self.stop -= 1

    def move_down(self) -> None:
        """Select the next entry, scrolling when near the bottom."""
        if self.selected < self.size - 1:
            self.selected += 1
            if self.stop - self.selected < 2 and self.stop < self.size:
                self.start += 1
                self.stop += 1

    def visible(self) -> range:
        """Indices of the entries on screen."""
        return range(self.start, self.stop)

    def shrink(self, size: int) -> None:
        """Adjust after the selected entry was removed from the list."""
        self.size = size
        if self.start:
            self.start -= 1
        if self.stop:
            self.stop -= 1
        if self.selected:
            self.selected -= 1
        self.stop = min(self.stop, size)