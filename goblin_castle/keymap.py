"""Key bindings: which events mean which commands."""

from __future__ import annotations

from typing import Optional

from .cells import Event, Key, KeyChar, KeySpecial
from .ui import SCROLL_BOTTOM, SCROLL_TOP, Command, History, Move, Scroll

_PLAY_COMMANDS = {
    KeyChar("y"): Move(-1, -1),
    KeyChar("k"): Move(0, -1),
    KeyChar("u"): Move(1, -1),
    KeyChar("h"): Move(-1, 0),
    KeyChar("l"): Move(1, 0),
    KeyChar("b"): Move(-1, 1),
    KeyChar("j"): Move(0, 1),
    KeyChar("n"): Move(1, 1),
    KeySpecial(Key.HOME): Move(-1, -1),
    KeySpecial(Key.UP): Move(0, -1),
    KeySpecial(Key.PG_UP): Move(1, -1),
    KeySpecial(Key.LEFT): Move(-1, 0),
    KeySpecial(Key.RIGHT): Move(1, 0),
    KeySpecial(Key.END): Move(-1, 1),
    KeySpecial(Key.DOWN): Move(0, 1),
    KeySpecial(Key.PG_DN): Move(1, 1),
    KeyChar("."): Move(0, 0),
    KeyChar("m"): History(),
}

_SCROLL_COMMANDS = {
    KeySpecial(Key.HOME): Scroll(SCROLL_TOP),
    KeySpecial(Key.PG_UP): Scroll(-10),
    KeySpecial(Key.UP): Scroll(-1),
    KeySpecial(Key.DOWN): Scroll(1),
    KeySpecial(Key.PG_DN): Scroll(10),
    KeySpecial(Key.END): Scroll(SCROLL_BOTTOM),
}


def map_play_command(event: Event) -> Optional[Command]:
    """The command an event means on the play screen, if any."""
    return _PLAY_COMMANDS.get(event)


def map_scroll_command(event: Event) -> Optional[Command]:
    """The command an event means in a scrolling window, if any."""
    return _SCROLL_COMMANDS.get(event)