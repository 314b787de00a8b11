"""Line-of-sight field of view."""

from __future__ import annotations

from typing import Callable, List, Tuple

DEFAULT_RADIUS = 8


def compute_fov(
    width: int,
    height: int,
    is_transparent: Callable[[int, int], bool],
    player_x: int,
    player_y: int,
    radius: int = DEFAULT_RADIUS,
) -> List[bool]:
    """Return the visibility of every square, row by row, seen from the player.

    A ray is cast to every square within ``radius``; it marks squares visible
    until it reaches one that is not transparent, which is itself visible.
    """
    visible = [False] * (width * height)
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy > radius * radius:
                continue
            tx = player_x + dx
            ty = player_y + dy
            if not (0 <= tx < width and 0 <= ty < height):
                continue
            for x, y in line(player_x, player_y, tx, ty):
                visible[y * width + x] = True
                if not is_transparent(x, y):
                    break
    return visible


def line(x0: int, y0: int, x1: int, y1: int) -> List[Tuple[int, int]]:
    """Bresenham's line from (x0, y0) to (x1, y1), both ends included."""
    points = []
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
    return points