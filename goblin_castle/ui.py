"""Screen layout, player commands, scene transitions and the scene interface."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .cells import Event

if TYPE_CHECKING:
    from .console import Console
    from .game import Game

CONSOLE_WIDTH = 80
CONSOLE_HEIGHT = 43

MAP_OFFSET_X = 0
MAP_OFFSET_Y = 4

LOG_OFFSET_X = 0
LOG_OFFSET_Y = 0
LOG_LINES = 4

POPUP_MARGIN_H = 6
POPUP_MARGIN_V = 3

SCROLL_TOP = -128
SCROLL_BOTTOM = 127


@dataclass(frozen=True)
class Move:
    """Step the player by (dx, dy)."""

    dx: int
    dy: int


@dataclass(frozen=True)
class History:
    """Open the message history."""


@dataclass(frozen=True)
class Scroll:
    """Scroll by ``delta`` lines; SCROLL_TOP and SCROLL_BOTTOM jump to the ends."""

    delta: int


Command = Union[Move, History, Scroll]


class Scene(abc.ABC):
    """One screen of the game: draws itself and reacts to events."""

    @abc.abstractmethod
    def render(self, game: Game, console: Console) -> None:
        """Draw one full frame of this scene."""

    @abc.abstractmethod
    def handle_event(self, game: Game, event: Event) -> Transition:
        """Handle one event and decide what happens next."""


@dataclass(frozen=True)
class Okay:
    """Event handled; stay in the same scene."""


@dataclass(frozen=True)
class Beep:
    """Unexpected event; ring the bell and stay in the same scene."""


@dataclass(frozen=True)
class Switch:
    """Event handled; replace the current scene."""

    scene: Scene


@dataclass(frozen=True)
class Push:
    """Keep the current scene underneath and enter a new one."""

    scene: Scene


@dataclass(frozen=True)
class Pop:
    """Return to the previous scene."""


Transition = Union[Okay, Beep, Switch, Push, Pop]