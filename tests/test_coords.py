"""
Tests for CoordinateResolver and responsive sizing.
"""

from arc_editor.config import responsive_display_size
from arc_editor.core.coords import CoordinateResolver, Viewport, cell_size


def test_cell_size_formula():
    # floor(480 / 10) = 48
    assert cell_size((10, 5), min_cell_px=6, max_display_px=480) == 48
    # floor(480 / 30) = 16
    assert cell_size((3, 30), min_cell_px=6, max_display_px=480) == 16
    # clamped to the minimum visible size
    assert cell_size((30, 30), min_cell_px=6, max_display_px=100) == 6
    # zoom multiplies the clamped size
    assert cell_size((10, 10), min_cell_px=6, max_display_px=480, scale=1.5) == 72


def test_resolve_inside_and_edges():
    res = CoordinateResolver(min_cell_px=6, max_display_px=100)   # 2x2 -> 50 px cells
    vp = Viewport(origin_x=10, origin_y=20)
    assert res.resolve(10, 20, (2, 2), vp) == (0, 0)
    assert res.resolve(59.9, 69.9, (2, 2), vp) == (0, 0)
    assert res.resolve(60, 20, (2, 2), vp) == (0, 1)
    assert res.resolve(10, 70, (2, 2), vp) == (1, 0)
    assert res.resolve(109.9, 119.9, (2, 2), vp) == (1, 1)


def test_resolve_outside_is_none():
    res = CoordinateResolver(min_cell_px=6, max_display_px=100)
    vp = Viewport(origin_x=10, origin_y=20)
    assert res.resolve(9.9, 30, (2, 2), vp) is None
    assert res.resolve(30, 19.9, (2, 2), vp) is None
    assert res.resolve(110, 30, (2, 2), vp) is None
    assert res.resolve(30, 120, (2, 2), vp) is None


def test_resolve_non_square_grid():
    res = CoordinateResolver(min_cell_px=6, max_display_px=120)   # 2x4 -> 30 px cells
    vp = Viewport()
    assert res.resolve(119, 59, (2, 4), vp) == (1, 3)
    assert res.resolve(119, 61, (2, 4), vp) is None, "below the last row"


def test_resolve_respects_zoom():
    res = CoordinateResolver(min_cell_px=6, max_display_px=100)
    assert res.resolve(120, 0, (2, 2), Viewport(scale=2.0)) == (0, 1)
    assert res.resolve(120, 0, (2, 2), Viewport(scale=1.0)) is None


def test_responsive_display_size():
    assert responsive_display_size(1920, 1080) == 480, "capped"
    assert responsive_display_size(400, 1000) == 360, "90% of width"
    assert responsive_display_size(1000, 500) == 300, "60% of height"
    assert responsive_display_size(0, 0) == 1
