"""Terminal output with ANSI sequences and keyboard input through blessed."""

from __future__ import annotations

import contextlib
from typing import IO, Optional, Tuple

import blessed

from .cells import Abort, Buffer, Color, Event, Key, KeyChar, KeySpecial

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
RESET_COLORS = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J"
BELL = "\x07"

_CTRL_C = "\x03"

_PALETTE = {
    Color.BLACK: 0,
    Color.RED: 1,
    Color.GREEN: 2,
    Color.YELLOW: 3,
    Color.BLUE: 4,
    Color.MAGENTA: 5,
    Color.CYAN: 6,
    Color.WHITE: 7,
    Color.BRIGHT_BLACK: 8,
    Color.BRIGHT_RED: 9,
    Color.BRIGHT_GREEN: 10,
    Color.BRIGHT_YELLOW: 11,
    Color.BRIGHT_BLUE: 12,
    Color.BRIGHT_MAGENTA: 13,
    Color.BRIGHT_CYAN: 14,
    Color.BRIGHT_WHITE: 15,
}

_SPECIAL_KEYS = {
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_HOME": Key.HOME,
    "KEY_END": Key.END,
    "KEY_PGUP": Key.PG_UP,
    "KEY_PPAGE": Key.PG_UP,
    "KEY_PGDOWN": Key.PG_DN,
    "KEY_NPAGE": Key.PG_DN,
}


def convert_color(color: Color) -> Optional[int]:
    """Return the palette index of a colour, or None for the terminal default."""
    return _PALETTE.get(color)


def foreground(color: Color) -> str:
    """Escape sequence selecting a foreground colour."""
    index = convert_color(color)
    return "\x1b[39m" if index is None else f"\x1b[38;5;{index}m"


def background(color: Color) -> str:
    """Escape sequence selecting a background colour."""
    index = convert_color(color)
    return "\x1b[49m" if index is None else f"\x1b[48;5;{index}m"


def move_to(x: int, y: int) -> str:
    """Escape sequence moving the cursor to zero-based column x, row y."""
    return f"\x1b[{y + 1};{x + 1}H"


def title_sequence(title: str) -> str:
    """Escape sequence setting the window title."""
    return f"\x1b]0;{title}\x07"


def translate_key(key) -> Optional[Event]:
    """Turn a keystroke into a game event, or None if the game ignores it."""
    text = str(key)
    if text == _CTRL_C:
        return Abort()
    special = _SPECIAL_KEYS.get(getattr(key, "name", None) or "")
    if special is not None:
        return KeySpecial(special)
    if getattr(key, "is_sequence", False):
        return None
    if len(text) == 1 and text.isprintable() and not text.isupper():
        return KeyChar(text)
    return None


class Terminal:
    """Full-screen terminal session: alternate screen and raw keyboard mode.

    The screen is restored by :meth:`close`, or on leaving a ``with`` block.
    """

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._term = blessed.Terminal(stream=stream)
        self._stream = self._term.stream
        self._modes = contextlib.ExitStack()
        self._closed = False
        try:
            self._modes.enter_context(self._term.raw())
            self._write(HIDE_CURSOR + ENTER_ALT_SCREEN)
            self._write(RESET_COLORS + CLEAR_SCREEN)
        except BaseException:
            self._modes.close()
            raise

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def display(
        self,
        current: Buffer,
        previous: Buffer,
        cursor: Optional[Tuple[int, int]],
    ) -> None:
        """Draw the cells of ``current`` that differ from ``previous``."""
        if (current.width, current.height) != (previous.width, previous.height):
            raise ValueError("buffers differ in size")
        if cursor is not None:
            cx, cy = cursor
            if not (0 <= cx < current.width and 0 <= cy < current.height):
                raise ValueError(f"cursor {cursor} outside the screen")

        out = [HIDE_CURSOR, foreground(Color.DEFAULT), background(Color.DEFAULT)]
        last_fg = Color.DEFAULT
        last_bg = Color.DEFAULT
        expected = None
        for (x, y, curr), (_, _, prev) in zip(current, previous):
            if curr == prev:
                continue
            if expected != (x, y):
                out.append(move_to(x, y))
            if curr.fg != last_fg:
                out.append(foreground(curr.fg))
                last_fg = curr.fg
            if curr.bg != last_bg:
                out.append(background(curr.bg))
                last_bg = curr.bg
            out.append(curr.ch)
            expected = (x + 1, y)
        if cursor is not None:
            out.append(move_to(*cursor))
            out.append(SHOW_CURSOR)
        self._write("".join(out))

    def set_title(self, title: str) -> None:
        self._write(title_sequence(title))

    def alert(self) -> None:
        """Ring the terminal bell."""
        self._write(BELL)

    def read_event(self) -> Event:
        """Block until a key the game understands is pressed."""
        while True:
            key = self._term.inkey()
            if not str(key):
                raise EOFError("no keyboard input available")
            event = translate_key(key)
            if event is not None:
                return event

    def close(self) -> None:
        """Restore the normal screen and keyboard mode."""
        if self._closed:
            return
        self._closed = True
        try:
            self._write(RESET_COLORS + CLEAR_SCREEN)
            self._write(LEAVE_ALT_SCREEN + SHOW_CURSOR)
        finally:
            self._modes.close()

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, *args) -> None:
        self.close()