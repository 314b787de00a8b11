"""Drawing the map, the message log and the history window."""

from __future__ import annotations

from .console import Console
from .game import Game
from . import theme
from .theme import Decoration
from .ui import (
    CONSOLE_HEIGHT,
    CONSOLE_WIDTH,
    LOG_LINES,
    LOG_OFFSET_X,
    LOG_OFFSET_Y,
    MAP_OFFSET_X,
    MAP_OFFSET_Y,
    POPUP_MARGIN_H,
    POPUP_MARGIN_V,
)


def render_map(console: Console, game: Game) -> None:
    """Draw seen and remembered tiles, visible creatures and the player."""
    level = game.level
    for y in range(level.height):
        for x in range(level.width):
            if level.is_visible(x, y):
                cell = theme.visible_tile(level.get_tile(x, y))
            elif level.is_explored(x, y):
                cell = theme.explored_tile(level.get_tile(x, y))
            else:
                continue
            console.set_cell(x + MAP_OFFSET_X, y + MAP_OFFSET_Y, cell)
    for actor in level.actors:
        if level.is_visible(actor.x, actor.y):
            console.set_cell(
                actor.x + MAP_OFFSET_X, actor.y + MAP_OFFSET_Y, theme.glyph(actor.glyph)
            )
    player = level.player
    if player is None:
        raise RuntimeError("level has no player")
    px, py = player.x + MAP_OFFSET_X, player.y + MAP_OFFSET_Y
    console.set_cell(px, py, theme.glyph(player.glyph))
    console.show_cursor(px, py)


def render_log(console: Console, game: Game) -> None:
    """Draw the most recent messages, older ones fainter."""
    for n, (msg, age) in enumerate(game.log.latest(LOG_LINES)):
        console.print(
            LOG_OFFSET_X,
            LOG_OFFSET_Y + n,
            msg,
            theme.log_message_fg(age),
            theme.log_message_bg(age),
        )


def render_history_box(console: Console, game: Game, scroll: int) -> None:
    """Draw the message history window starting at message ``scroll``."""
    x0 = POPUP_MARGIN_H
    y0 = POPUP_MARGIN_V
    x1 = CONSOLE_WIDTH - POPUP_MARGIN_H - 1
    y1 = CONSOLE_HEIGHT - POPUP_MARGIN_V - 1
    draw_box(console, x0, y0, x1, y1)
    draw_bracketed_center(console, (x0 + x1) // 2, y0, " Message history ")
    draw_bracketed_right(console, x1 - 2, y1, " Up/Dn ")

    left = POPUP_MARGIN_H + 1
    top = POPUP_MARGIN_V + 1
    width = CONSOLE_WIDTH - POPUP_MARGIN_H * 2 - 2
    height = CONSOLE_HEIGHT - POPUP_MARGIN_V * 2 - 2
    console.clear_rect(left, top, width, height)
    for n, msg in enumerate(game.log.peek(scroll, height)):
        console.print(
            left + 1,
            top + n,
            msg[: width - 2],
            theme.history_fg(),
            theme.history_bg(),
        )


def draw_box(console: Console, x0: int, y0: int, x1: int, y1: int) -> None:
    """Draw a frame with corners at (x0, y0) and (x1, y1)."""
    console.set_cell(x0, y0, theme.box_decoration(Decoration.TOP_LEFT_CORNER))
    console.set_cell(x1, y0, theme.box_decoration(Decoration.TOP_RIGHT_CORNER))
    console.set_cell(x0, y1, theme.box_decoration(Decoration.BOTTOM_LEFT_CORNER))
    console.set_cell(x1, y1, theme.box_decoration(Decoration.BOTTOM_RIGHT_CORNER))
    horizontal = theme.box_decoration(Decoration.HORIZONTAL)
    for x in range(x0 + 1, x1):
        console.set_cell(x, y0, horizontal)
        console.set_cell(x, y1, horizontal)
    vertical = theme.box_decoration(Decoration.VERTICAL)
    for y in range(y0 + 1, y1):
        console.set_cell(x0, y, vertical)
        console.set_cell(x1, y, vertical)


def draw_bracketed_center(console: Console, xc: int, y: int, text: str) -> None:
    """Draw text in brackets centred on column ``xc``."""
    length = len(text)
    x0 = xc - length // 2 + 1
    console.set_cell(x0 - 1, y, theme.box_decoration(Decoration.LEFT_BRACKET))
    console.print(x0, y, text, theme.box_fg(), theme.box_bg())
    console.set_cell(x0 + length, y, theme.box_decoration(Decoration.RIGHT_BRACKET))


def draw_bracketed_right(console: Console, xr: int, y: int, text: str) -> None:
    """Draw text in brackets whose closing bracket sits at column ``xr``."""
    x0 = xr - len(text)
    console.set_cell(x0 - 1, y, theme.box_decoration(Decoration.LEFT_BRACKET))
    console.print(x0, y, text, theme.box_fg(), theme.box_bg())
    console.set_cell(xr, y, theme.box_decoration(Decoration.RIGHT_BRACKET))