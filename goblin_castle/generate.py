"""Random dungeon generation: rooms joined by corridors, with goblins inside."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from itertools import pairwise
from typing import Optional, Tuple

from .entities import Entity, Glyph, Tile
from .level import Level

log = logging.getLogger(__name__)

LEVEL_WIDTH = 80
LEVEL_HEIGHT = 38
ROOM_ATTEMPTS = 40
MIN_ROOM_SIZE = 6


@dataclass(frozen=True)
class Room:
    """A rectangle of the map whose border is wall and interior floor."""

    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def random(
        cls,
        min_width: int,
        min_height: int,
        max_width: int,
        max_height: int,
        map_width: int,
        map_height: int,
        rng: random.Random,
    ) -> Room:
        """A room of random size placed at random within the map."""
        width = rng.randint(min_width, max_width)
        height = rng.randint(min_height, max_height)
        x = rng.randint(0, map_width - width)
        y = rng.randint(0, map_height - height)
        return cls(x, y, x + width - 1, y + height - 1)

    def intersects(self, other: Room) -> bool:
        return (
            self.x0 <= other.x1
            and self.x1 >= other.x0
            and self.y0 <= other.y1
            and self.y1 >= other.y0
        )

    def carve(self, level: Level) -> None:
        """Turn the room's interior into floor."""
        for y in range(self.y0 + 1, self.y1):
            for x in range(self.x0 + 1, self.x1):
                level.set_tile(x, y, Tile.FLOOR)

    def tunnel_to(self, other: Room, level: Level, rng: random.Random) -> None:
        """Dig an L-shaped corridor from this room's interior to the other's."""
        xa, ya = self.pick_xy(rng)
        xb, yb = other.pick_xy(rng)
        if rng.getrandbits(1):
            xm, ym = xa, yb
        else:
            xm, ym = xb, ya
        draw_line(xa, ya, xm, ym, level)
        draw_line(xm, ym, xb, yb, level)

    def pick_xy(self, rng: random.Random) -> Tuple[int, int]:
        """A random square of the room's interior."""
        x = rng.randint(self.x0 + 1, self.x1 - 1)
        y = rng.randint(self.y0 + 1, self.y1 - 1)
        return x, y


def seeded_rng(seed: Optional[int] = None) -> random.Random:
    """A generator seeded with ``seed``, or with a fresh random seed."""
    if seed is None:
        seed = random.SystemRandom().getrandbits(64)
    log.info("Level seed is 0x%08X", seed)
    return random.Random(seed)


def draw_line(x1: int, y1: int, x2: int, y2: int, level: Level) -> None:
    """Make a straight horizontal or vertical run of floor."""
    if x1 == x2:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            level.set_tile(x1, y, Tile.FLOOR)
    elif y1 == y2:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            level.set_tile(x, y1, Tile.FLOOR)
    else:
        raise ValueError(f"line ({x1}, {y1})-({x2}, {y2}) is not straight")


def place_monsters(room: Room, level: Level, rng: random.Random) -> None:
    """Put up to two goblins or hobgoblins in the room, never on top of another."""
    for _ in range(rng.randint(0, 2)):
        pos = room.pick_xy(rng)
        if any(actor.pos == pos for actor in level.actors):
            continue
        glyph = Glyph.GOBLIN if rng.random() < 4 / 5 else Glyph.HOBGOBLIN
        level.add_actor(Entity(pos[0], pos[1], glyph))


def generate_level(seed: Optional[int] = None) -> Level:
    """Build a new level; the same seed always gives the same level."""
    width, height = LEVEL_WIDTH, LEVEL_HEIGHT
    rng = seeded_rng(seed)
    rooms: list = []
    for _ in range(ROOM_ATTEMPTS):
        room = Room.random(
            MIN_ROOM_SIZE, MIN_ROOM_SIZE, width // 3, height // 3, width, height, rng
        )
        if not any(room.intersects(other) for other in rooms):
            rooms.append(room)

    level = Level(width, height, rooms[0].pick_xy(rng))
    for room in rooms:
        room.carve(level)
    for first, second in pairwise(rooms):
        first.tunnel_to(second, level, rng)
    for room in rooms:
        place_monsters(room, level, rng)
    return level