"""Screen cells, colours, off-screen buffers and input events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterator, Tuple, Union


class Color(enum.Enum):
    """The sixteen terminal colours plus the terminal's own default."""

    DEFAULT = enum.auto()
    BLACK = enum.auto()
    RED = enum.auto()
    GREEN = enum.auto()
    YELLOW = enum.auto()
    BLUE = enum.auto()
    MAGENTA = enum.auto()
    CYAN = enum.auto()
    WHITE = enum.auto()
    BRIGHT_BLACK = enum.auto()
    BRIGHT_RED = enum.auto()
    BRIGHT_GREEN = enum.auto()
    BRIGHT_YELLOW = enum.auto()
    BRIGHT_BLUE = enum.auto()
    BRIGHT_MAGENTA = enum.auto()
    BRIGHT_CYAN = enum.auto()
    BRIGHT_WHITE = enum.auto()

    def dimmed(self) -> Color:
        """Return the darker counterpart of this colour, or the colour itself."""
        return _DIMMED.get(self, self)


_DIMMED = {
    Color.BRIGHT_RED: Color.RED,
    Color.BRIGHT_GREEN: Color.GREEN,
    Color.BRIGHT_YELLOW: Color.YELLOW,
    Color.BRIGHT_BLUE: Color.BLUE,
    Color.BRIGHT_MAGENTA: Color.MAGENTA,
    Color.BRIGHT_CYAN: Color.CYAN,
    Color.WHITE: Color.BRIGHT_BLACK,
    Color.BRIGHT_WHITE: Color.BRIGHT_BLACK,
}


@dataclass(frozen=True)
class Cell:
    """One character on screen with its colours."""

    ch: str = " "
    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT


class Buffer:
    """A rectangular grid of cells, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid buffer size {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [Cell()] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"cell ({x}, {y}) outside {self.width}x{self.height} buffer"
            )
        return y * self.width + x

    def clear(self) -> None:
        """Reset every cell to the default blank cell."""
        self._cells = [Cell()] * len(self._cells)

    def get(self, x: int, y: int) -> Cell:
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        self._cells[self._index(x, y)] = cell

    def fill_rect(self, x0: int, y0: int, width: int, height: int, value: Cell) -> None:
        """Set every cell of the given rectangle to ``value``."""
        if (
            x0 < 0
            or y0 < 0
            or width < 0
            or height < 0
            or x0 + width > self.width
            or y0 + height > self.height
        ):
            raise IndexError(
                f"rectangle ({x0}, {y0}, {width}x{height}) outside "
                f"{self.width}x{self.height} buffer"
            )
        for y in range(y0, y0 + height):
            start = y * self.width + x0
            self._cells[start : start + width] = [value] * width

    def apply(self, transform: Callable[[Cell], Cell]) -> None:
        """Replace every cell with ``transform(cell)``."""
        self._cells = [transform(cell) for cell in self._cells]

    def __iter__(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` row by row."""
        for index, cell in enumerate(self._cells):
            y, x = divmod(index, self.width)
            yield x, y, cell


class Key(enum.Enum):
    """Special keys the game reacts to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PG_UP = enum.auto()
    PG_DN = enum.auto()


@dataclass(frozen=True)
class Abort:
    """The user asked to quit immediately."""


@dataclass(frozen=True)
class KeyChar:
    """A plain character key."""

    ch: str


@dataclass(frozen=True)
class KeySpecial:
    """A special (non-character) key."""

    key: Key


Event = Union[Abort, KeyChar, KeySpecial]