"""A dungeon level: its tiles, what the player sees, and who lives there."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .entities import Entity, Tile
from .fov import compute_fov


class Level:
    """A rectangular map of tiles with its visibility state and creatures."""

    def __init__(self, width: int, height: int, entry: Tuple[int, int]) -> None:
        self._width = width
        self._height = height
        self._entry = entry
        size = width * height
        self._tiles: List[Tile] = [Tile.WALL] * size
        self._visible: List[bool] = [False] * size
        self._explored: List[bool] = [False] * size
        self._actors: List[Entity] = []
        self._player: Optional[Entity] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def entry(self) -> Tuple[int, int]:
        """Where the player starts on this level."""
        return self._entry

    @property
    def actors(self) -> Tuple[Entity, ...]:
        """The creatures other than the player."""
        return tuple(self._actors)

    @property
    def player(self) -> Optional[Entity]:
        return self._player

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"square ({x}, {y}) outside {self._width}x{self._height} level"
            )
        return y * self._width + x

    def get_tile(self, x: int, y: int) -> Tile:
        return self._tiles[self._index(x, y)]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._tiles[self._index(x, y)] = tile

    def is_visible(self, x: int, y: int) -> bool:
        return self._visible[self._index(x, y)]

    def is_explored(self, x: int, y: int) -> bool:
        return self._explored[self._index(x, y)]

    def add_actor(self, entity: Entity) -> None:
        self._actors.append(entity)

    def add_player(self, entity: Entity) -> None:
        self._player = entity

    def update_vision(self) -> None:
        """Recompute what the player sees and remember it as explored."""
        if self._player is None:
            raise RuntimeError("level has no player")
        self._visible = compute_fov(
            self._width,
            self._height,
            lambda x, y: self._tiles[y * self._width + x] != Tile.WALL,
            self._player.x,
            self._player.y,
        )
        self._explored = [e or v for e, v in zip(self._explored, self._visible)]