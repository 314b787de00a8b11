import pytest

from goblin_castle.app import main, run
from goblin_castle.cells import Abort, Key, KeyChar, KeySpecial
from goblin_castle.console import Console
from goblin_castle.game import Game
from goblin_castle.ui import CONSOLE_HEIGHT, CONSOLE_WIDTH


class ScriptedTerminal:
    def __init__(self, events):
        self.events = list(events)
        self.cursors = []
        self.alerts = 0
        self.closed = False
        self.title = None

    def set_title(self, title):
        self.title = title

    def display(self, current, previous, cursor):
        self.cursors.append(cursor)

    def alert(self):
        self.alerts += 1

    def read_event(self):
        return self.events.pop(0)

    def close(self):
        self.closed = True


def play(events):
    terminal = ScriptedTerminal(events)
    console = Console(CONSOLE_WIDTH, CONSOLE_HEIGHT, "Goblin Castle", terminal)
    run(console, Game(seed=2))
    return terminal


def test_abort_on_start_screen():
    terminal = play([Abort()])
    assert terminal.cursors == [(52, 21)]
    assert terminal.events == []


def test_unbound_key_rings_bell():
    terminal = play([KeyChar("a"), KeyChar("q"), Abort()])
    assert terminal.alerts == 1
    assert len(terminal.cursors) == 3


def test_history_push_and_pop():
    terminal = play(
        [KeyChar("a"), KeyChar("m"), KeySpecial(Key.UP), KeyChar("q"), Abort()]
    )
    assert terminal.alerts == 0
    assert len(terminal.cursors) == 5
    assert terminal.cursors[2] is None
    assert terminal.cursors[3] is None
    assert terminal.cursors[4] == terminal.cursors[1]


def test_passed_console_is_left_open():
    terminal = play([Abort()])
    assert terminal.closed is False


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])