import pytest

from goblin_castle.cells import (
    Abort,
    Buffer,
    Cell,
    Color,
    Key,
    KeyChar,
    KeySpecial,
)


def test_bright_colours_dim_to_dark_pair():
    assert Color.BRIGHT_RED.dimmed() is Color.RED
    assert Color.BRIGHT_CYAN.dimmed() is Color.CYAN


def test_greys_dim_to_bright_black():
    assert Color.WHITE.dimmed() is Color.BRIGHT_BLACK
    assert Color.BRIGHT_WHITE.dimmed() is Color.BRIGHT_BLACK


def test_dark_colours_unchanged_by_dimming():
    for color in (Color.DEFAULT, Color.BLACK, Color.RED, Color.BRIGHT_BLACK):
        assert color.dimmed() is color


@pytest.mark.parametrize("name", [c.name for c in Color])
def test_dimming_is_idempotent(name):
    once = Color[name].dimmed()
    assert once.dimmed() is once


def test_default_cell_is_blank_with_default_colours():
    assert Cell() == Cell(" ", Color.DEFAULT, Color.DEFAULT)


def test_new_buffer_is_blank():
    buf = Buffer(4, 3)
    assert all(cell == Cell() for _, _, cell in buf)
    assert len(list(buf)) == 12


def test_set_then_get_round_trip():
    buf = Buffer(5, 5)
    cell = Cell("x", Color.RED, Color.BLUE)
    buf.set(4, 2, cell)
    assert buf.get(4, 2) == cell
    assert buf.get(2, 4) == Cell()


@pytest.mark.parametrize("x,y", [(5, 0), (0, 5), (-1, 0), (0, -1)])
def test_out_of_range_access_raises(x, y):
    buf = Buffer(5, 5)
    with pytest.raises(IndexError):
        buf.get(x, y)
    with pytest.raises(IndexError):
        buf.set(x, y, Cell())


def test_iteration_is_row_major():
    buf = Buffer(3, 2)
    coords = [(x, y) for x, y, _ in buf]
    assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]


def test_clear_resets_cells():
    buf = Buffer(3, 3)
    buf.set(1, 1, Cell("#"))
    buf.clear()
    assert buf.get(1, 1) == Cell()


def test_fill_rect_only_touches_rectangle():
    buf = Buffer(6, 5)
    fill = Cell("*", Color.GREEN)
    buf.fill_rect(1, 2, 3, 2, fill)
    for x, y, cell in buf:
        inside = 1 <= x < 4 and 2 <= y < 4
        assert (cell == fill) == inside


def test_fill_rect_outside_buffer_raises():
    buf = Buffer(4, 4)
    with pytest.raises(IndexError):
        buf.fill_rect(2, 0, 3, 1, Cell())


def test_apply_transforms_every_cell():
    buf = Buffer(2, 2)
    buf.set(0, 0, Cell("a"))
    buf.apply(lambda c: Cell(c.ch.upper(), Color.RED, c.bg))
    assert buf.get(0, 0) == Cell("A", Color.RED)
    assert all(cell.fg is Color.RED for _, _, cell in buf)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Buffer(-1, 2)


def test_events_compare_by_value():
    assert KeyChar("a") == KeyChar("a")
    assert KeyChar("a") != KeyChar("b")
    assert KeySpecial(Key.UP) == KeySpecial(Key.UP)
    assert Abort() == Abort()