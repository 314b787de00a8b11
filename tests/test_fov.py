import pytest

from goblin_castle.fov import compute_fov, line


def test_horizontal_line():
    assert line(0, 0, 3, 0) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_single_point_line():
    assert line(4, 4, 4, 4) == [(4, 4)]


@pytest.mark.parametrize(
    "x0, y0, x1, y1",
    [(0, 0, 7, 3), (5, 5, -2, 1), (3, 9, 3, 0), (0, 0, -4, -4), (2, 1, 9, 8)],
)
def test_line_is_continuous_and_minimal(x0, y0, x1, y1):
    pts = line(x0, y0, x1, y1)
    assert pts[0] == (x0, y0)
    assert pts[-1] == (x1, y1)
    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_open_field_within_radius_is_visible():
    width, height = 30, 30
    px, py = 15, 15
    vis = compute_fov(width, height, lambda x, y: True, px, py)
    assert len(vis) == width * height
    for y in range(height):
        for x in range(width):
            inside = (x - px) ** 2 + (y - py) ** 2 <= 8 * 8
            assert vis[y * width + x] == inside


def test_default_radius_limit():
    vis = compute_fov(20, 1, lambda x, y: True, 0, 0)
    assert vis[8] is True
    assert vis[9] is False


def test_custom_radius():
    vis = compute_fov(20, 1, lambda x, y: True, 0, 0, radius=3)
    assert vis[:4] == [True] * 4
    assert not any(vis[4:])


def test_wall_blocks_sight():
    width, height = 20, 5

    def transparent(x, y):
        return x != 4

    vis = compute_fov(width, height, transparent, 2, 2)
    assert vis[2 * width + 4] is True
    for y in range(height):
        for x in range(5, width):
            assert vis[y * width + x] is False