from goblin_castle.cells import Color, Key, KeyChar, KeySpecial
from goblin_castle.console import Console
from goblin_castle.game import Game
from goblin_castle.scenes import HistoryPopup, PlayScreen, StartScreen
from goblin_castle.ui import (
    CONSOLE_HEIGHT,
    CONSOLE_WIDTH,
    POPUP_MARGIN_H,
    POPUP_MARGIN_V,
    Beep,
    Okay,
    Pop,
    Push,
    Switch,
)


class FakeTerminal:
    def set_title(self, title):
        return None

    def display(self, current, previous, cursor):
        return None

    def alert(self):
        return None

    def read_event(self):
        raise EOFError

    def close(self):
        return None


def make_console():
    return Console(CONSOLE_WIDTH, CONSOLE_HEIGHT, "test", FakeTerminal())


def row(console, y):
    return "".join(console.cell(x, y).ch for x in range(console.width))


def game_with_messages(count):
    game = Game(seed=11)
    for n in range(count):
        game.log.append(f"message {n}")
    return game


def test_start_screen_render():
    console = make_console()
    StartScreen().render(Game(seed=1), console)
    assert row(console, 21)[27:].startswith("Press any key to start...")
    assert console.cursor == (52, 21)


def test_start_screen_switches_to_play():
    game = Game(seed=1)
    result = StartScreen().handle_event(game, KeyChar("x"))
    assert isinstance(result, Switch)
    assert isinstance(result.scene, PlayScreen)
    # the new scene behaves as the play screen: an unbound key beeps
    assert result.scene.handle_event(game, KeyChar("q")) == Beep()


def test_play_screen_unbound_key_beeps():
    assert PlayScreen().handle_event(Game(seed=1), KeyChar("q")) == Beep()


def test_play_screen_wait_starts_turn():
    game = Game(seed=1)
    assert PlayScreen().handle_event(game, KeyChar(".")) == Okay()
    assert list(game.log.latest(1)) == [("Welcome to the Dungeon!", 1)]


def test_play_screen_blocked_move_beeps_and_stays():
    game = Game(seed=1)
    level = game.level
    before = game.level.player.pos
    keys = {
        (-1, 0): KeyChar("h"),
        (1, 0): KeyChar("l"),
        (0, -1): KeyChar("k"),
        (0, 1): KeyChar("j"),
    }
    results = {}
    for (dx, dy), key in keys.items():
        x, y = before[0] + dx, before[1] + dy
        floor = level.get_tile(x, y).name == "FLOOR"
        if not floor:
            results[(dx, dy)] = PlayScreen().handle_event(game, key)
    assert all(result == Beep() for result in results.values())
    assert game.level.player.pos == before


def test_play_screen_history_pushes_popup():
    game = Game(seed=1)
    result = PlayScreen().handle_event(game, KeyChar("m"))
    assert isinstance(result, Push)
    assert isinstance(result.scene, HistoryPopup)
    assert result.scene.from_bottom == 0
    # any non-scroll key closes the popup
    assert result.scene.handle_event(game, KeyChar("q")) == Pop()


def test_play_screen_render_shows_log_and_cursor():
    game = Game(seed=1)
    console = make_console()
    PlayScreen().render(game, console)
    assert row(console, 0).startswith("Welcome to the Dungeon!")
    assert console.cursor is not None and console.cursor[1] >= 4


def test_history_scrolling_is_clamped():
    game = game_with_messages(50)
    popup = HistoryPopup()
    assert popup.handle_event(game, KeySpecial(Key.HOME)) == Okay()
    top = popup.from_bottom
    assert top > 0
    popup.handle_event(game, KeySpecial(Key.UP))
    assert popup.from_bottom == top
    popup.handle_event(game, KeySpecial(Key.END))
    assert popup.from_bottom == 0
    popup.handle_event(game, KeySpecial(Key.DOWN))
    assert popup.from_bottom == 0
    popup.handle_event(game, KeySpecial(Key.UP))
    assert popup.from_bottom == 1
    popup.handle_event(game, KeySpecial(Key.PG_DN))
    assert popup.from_bottom == 0


def test_history_short_log_cannot_scroll():
    game = Game(seed=1)
    popup = HistoryPopup()
    popup.handle_event(game, KeySpecial(Key.PG_UP))
    assert popup.from_bottom == 0


def test_history_other_key_pops():
    assert HistoryPopup().handle_event(Game(seed=1), KeyChar("q")) == Pop()


def test_history_render_at_top_shows_first_message():
    game = game_with_messages(50)
    popup = HistoryPopup()
    popup.handle_event(game, KeySpecial(Key.HOME))
    console = make_console()
    popup.render(game, console)
    assert row(console, POPUP_MARGIN_V + 1)[POPUP_MARGIN_H + 2 :].startswith(
        "Welcome to the Dungeon!"
    )


def test_history_render_at_bottom_shows_last_message():
    game = game_with_messages(50)
    console = make_console()
    HistoryPopup().render(game, console)
    last_row = CONSOLE_HEIGHT - POPUP_MARGIN_V - 2
    assert row(console, last_row)[POPUP_MARGIN_H + 2 :].startswith("message 49 ")


def test_history_render_dims_background_and_hides_cursor():
    game = Game(seed=1)
    console = make_console()
    PlayScreen().render(game, console)
    HistoryPopup().render(game, console)
    assert console.cursor is None
    assert console.cell(0, 0).fg == Color.BRIGHT_WHITE.dimmed()