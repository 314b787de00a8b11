"""The main loop and the command that starts the game."""

from __future__ import annotations

import argparse
import contextlib
from typing import List, Optional, Sequence

from .cells import Abort
from .console import Console
from .game import Game
from .scenes import StartScreen
from .ui import CONSOLE_HEIGHT, CONSOLE_WIDTH, Beep, Okay, Pop, Push, Scene, Switch

TITLE = "Goblin Castle"


def run(console: Optional[Console] = None, game: Optional[Game] = None) -> None:
    """Play until the user aborts or leaves the last scene.

    A console made here is closed on return; one passed in is left open.
    """
    with contextlib.ExitStack() as stack_of_resources:
        if console is None:
            console = stack_of_resources.enter_context(
                Console(CONSOLE_WIDTH, CONSOLE_HEIGHT, TITLE)
            )
        if game is None:
            game = Game()
        _loop(console, game)


def _loop(console: Console, game: Game) -> None:
    stack: List[Scene] = []
    scene: Scene = StartScreen()
    while True:
        console.clear()
        for below in stack:
            below.render(game, console)
        scene.render(game, console)
        console.display()

        event = console.read_event()
        if isinstance(event, Abort):
            return
        transition = scene.handle_event(game, event)
        match transition:
            case Okay():
                pass
            case Beep():
                console.alert()
            case Switch(next_scene):
                scene = next_scene
            case Push(next_scene):
                stack.append(scene)
                scene = next_scene
            case Pop():
                if not stack:
                    return
                scene = stack.pop()
            case _:
                raise ValueError(f"unexpected transition {transition!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(prog="goblin-castle", description="A dungeon crawl.")
    parser.parse_args(argv)
    print(TITLE)
    run()
    return 0