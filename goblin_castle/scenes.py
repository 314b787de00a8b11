"""The game's screens: title, play, and the message history popup."""

from __future__ import annotations

from .cells import Color, Event
from .console import Console
from .game import Game, MoveBlocked
from .keymap import map_play_command, map_scroll_command
from . import render
from .ui import (
    CONSOLE_HEIGHT,
    POPUP_MARGIN_V,
    SCROLL_BOTTOM,
    SCROLL_TOP,
    Beep,
    History,
    Move,
    Okay,
    Pop,
    Push,
    Scene,
    Scroll,
    Switch,
    Transition,
)

_WINDOW_HEIGHT = CONSOLE_HEIGHT - POPUP_MARGIN_V * 2 - 2


class StartScreen(Scene):
    """Title screen waiting for any key."""

    def render(self, game: Game, console: Console) -> None:
        console.print(27, 21, "Press any key to start...", Color.DEFAULT, Color.DEFAULT)
        console.show_cursor(52, 21)

    def handle_event(self, game: Game, event: Event) -> Transition:
        return Switch(PlayScreen())


class PlayScreen(Scene):
    """The map and message log; the player moves around."""

    def render(self, game: Game, console: Console) -> None:
        render.render_map(console, game)
        render.render_log(console, game)

    def handle_event(self, game: Game, event: Event) -> Transition:
        command = map_play_command(event)
        match command:
            case None:
                return Beep()
            case Move(dx, dy):
                try:
                    game.move_player(dx, dy)
                except MoveBlocked:
                    return Beep()
                return Okay()
            case History():
                return Push(HistoryPopup())
            case _:
                raise ValueError(f"unexpected command {command!r}")


class HistoryPopup(Scene):
    """Scrollable window over the whole message log."""

    def __init__(self) -> None:
        self.from_bottom = 0

    def render(self, game: Game, console: Console) -> None:
        console.hide_cursor()
        console.dim()
        scroll = max(0, len(game.log) - (_WINDOW_HEIGHT + self.from_bottom))
        render.render_history_box(console, game, scroll)

    def handle_event(self, game: Game, event: Event) -> Transition:
        max_scroll = max(0, len(game.log) - _WINDOW_HEIGHT)
        command = map_scroll_command(event)
        match command:
            case None:
                return Pop()
            case Scroll(delta) if delta == SCROLL_TOP:
                self.from_bottom = max_scroll
            case Scroll(delta) if delta == SCROLL_BOTTOM:
                self.from_bottom = 0
            case Scroll(delta):
                self.from_bottom = min(max(self.from_bottom - delta, 0), max_scroll)
            case _:
                raise ValueError(f"unexpected command {command!r}")
        return Okay()