"""How tiles, creatures, messages and boxes look on screen."""

from __future__ import annotations

import enum

from .cells import Cell, Color
from .entities import Glyph, Tile


def glyph(glyph: Glyph) -> Cell:
    """The cell drawn for a creature."""
    return _GLYPHS[glyph]


def visible_tile(tile: Tile) -> Cell:
    """The cell drawn for a tile the player can see."""
    return _VISIBLE_TILES[tile]


def explored_tile(tile: Tile) -> Cell:
    """The cell drawn for a tile seen before but not now."""
    return _EXPLORED_TILES[tile]


def log_message_fg(age: int) -> Color:
    """Foreground of a log message, fading as it grows older."""
    if age == 0:
        return Color.BRIGHT_WHITE
    if age == 1:
        return Color.WHITE
    return Color.BRIGHT_BLACK


def log_message_bg(age: int) -> Color:
    return Color.BLACK


class Decoration(enum.Enum):
    """Parts of a drawn box."""

    TOP_LEFT_CORNER = "┌"
    TOP_RIGHT_CORNER = "┐"
    BOTTOM_LEFT_CORNER = "└"
    BOTTOM_RIGHT_CORNER = "┘"
    HORIZONTAL = "─"
    VERTICAL = "│"
    LEFT_BRACKET = "┤"
    RIGHT_BRACKET = "├"


def box_decoration(which: Decoration) -> Cell:
    return Cell(which.value, box_fg(), box_bg())


def box_fg() -> Color:
    return Color.BRIGHT_WHITE


def box_bg() -> Color:
    return Color.BLACK


def history_fg() -> Color:
    return Color.WHITE


def history_bg() -> Color:
    return Color.BLACK


_GLYPHS = {
    Glyph.PLAYER: Cell("@", Color.BRIGHT_WHITE, Color.BLACK),
    Glyph.GOBLIN: Cell("g", Color.BRIGHT_RED, Color.BLACK),
    Glyph.HOBGOBLIN: Cell("H", Color.BRIGHT_RED, Color.BLACK),
}

_VISIBLE_TILES = {
    Tile.WALL: Cell("#", Color.BRIGHT_WHITE, Color.BLACK),
    Tile.FLOOR: Cell(".", Color.BRIGHT_WHITE, Color.BLACK),
}

_EXPLORED_TILES = {
    Tile.WALL: Cell("#", Color.BRIGHT_BLACK, Color.BLACK),
    Tile.FLOOR: Cell(".", Color.BRIGHT_BLACK, Color.BLACK),
}