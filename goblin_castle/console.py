"""Double-buffered character console drawn onto a terminal."""

from __future__ import annotations

from typing import Optional, Tuple

from .cells import Buffer, Cell, Color, Event
from .term import Terminal


class Console:
    """A fixed-size grid of cells; only changed cells reach the terminal."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        terminal: Optional[Terminal] = None,
    ) -> None:
        self._terminal = terminal if terminal is not None else Terminal()
        self._terminal.set_title(title)
        self._front = Buffer(width, height)
        self._back = Buffer(width, height)
        self._cursor: Optional[Tuple[int, int]] = None

    @property
    def width(self) -> int:
        return self._back.width

    @property
    def height(self) -> int:
        return self._back.height

    @property
    def cursor(self) -> Optional[Tuple[int, int]]:
        """Where the cursor will be shown, or None if hidden."""
        return self._cursor

    def cell(self, x: int, y: int) -> Cell:
        """The cell drawn so far at (x, y) in the frame being built."""
        return self._back.get(x, y)

    def clear(self) -> None:
        """Blank the frame being built and hide the cursor."""
        self._back.clear()
        self._cursor = None

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._back.fill_rect(x, y, width, height, Cell())

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        self._back.set(x, y, cell)

    def print(self, x0: int, y0: int, text: str, fg: Color, bg: Color) -> None:
        """Write text from (x0, y0) rightwards, cut off at the right edge."""
        for x, ch in enumerate(text, start=x0):
            if x >= self._back.width:
                break
            self._back.set(x, y0, Cell(ch, fg, bg))

    def dim(self) -> None:
        """Darken the colours of everything drawn so far."""
        self._back.apply(lambda c: Cell(c.ch, c.fg.dimmed(), c.bg.dimmed()))

    def show_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def hide_cursor(self) -> None:
        self._cursor = None

    def display(self) -> None:
        """Send the finished frame to the terminal."""
        self._back, self._front = self._front, self._back
        self._terminal.display(self._front, self._back, self._cursor)

    def alert(self) -> None:
        self._terminal.alert()

    def read_event(self) -> Event:
        return self._terminal.read_event()

    def close(self) -> None:
        self._terminal.close()

    def __enter__(self) -> Console:
        return self

    def __exit__(self, *args) -> None:
        self.close()