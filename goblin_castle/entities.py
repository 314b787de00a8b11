"""Map tiles, creature glyphs and the entities that stand on the map."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple

_MAX_COORD = 255


class Tile(enum.Enum):
    """What a map square is made of."""

    WALL = enum.auto()
    FLOOR = enum.auto()


class Glyph(enum.Enum):
    """What kind of creature an entity is."""

    PLAYER = enum.auto()
    GOBLIN = enum.auto()
    HOBGOBLIN = enum.auto()


def _check_coord(value: int) -> int:
    if not 0 <= value <= _MAX_COORD:
        raise ValueError(f"coordinate {value} outside 0..{_MAX_COORD}")
    return value


@dataclass
class Entity:
    """A creature at a position on the map."""

    x: int
    y: int
    glyph: Glyph

    def __post_init__(self) -> None:
        _check_coord(self.x)
        _check_coord(self.y)

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        """Place the entity at (x, y)."""
        self.x = _check_coord(x)
        self.y = _check_coord(y)