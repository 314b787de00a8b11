"""Game state: the current level, the player and the message log."""

from __future__ import annotations

from typing import Optional

from .entities import Entity, Glyph, Tile
from .generate import generate_level
from .level import Level
from .messages import MessageLog

LOG_MEMORY = 100
WELCOME = "Welcome to the Dungeon!"


class MoveBlocked(Exception):
    """The player cannot move to the requested square."""


class Game:
    """A game in progress on one generated level."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._level = generate_level(seed)
        x, y = self._level.entry
        self._level.add_player(Entity(x, y, Glyph.PLAYER))
        self._level.update_vision()
        self._log = MessageLog(LOG_MEMORY)
        self._log.append(WELCOME)

    @property
    def level(self) -> Level:
        return self._level

    @property
    def log(self) -> MessageLog:
        return self._log

    def move_player(self, dx: int, dy: int) -> None:
        """Step the player by (dx, dy), starting a new turn.

        Raises MoveBlocked if the target is off the map or not floor.
        """
        player = self._level.player
        x = player.x + dx
        y = player.y + dy
        if (
            0 <= x < self._level.width
            and 0 <= y < self._level.height
            and self._level.get_tile(x, y) is Tile.FLOOR
        ):
            self._log.start_turn()
            player.move_to(x, y)
            self._level.update_vision()
            return
        raise MoveBlocked(f"cannot move to ({x}, {y})")