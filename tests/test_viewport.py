import pytest

from rascam.viewport import (
    CAMERA_FRAME_HEIGHT,
    CAMERA_FRAME_WIDTH,
    ScrollDirection,
    Viewport,
)


def _inside_frame(viewport):
    x, y, w, h = viewport.crop_box()
    return x >= 0 and y >= 0 and x + w <= CAMERA_FRAME_WIDTH and y + h <= CAMERA_FRAME_HEIGHT


def test_initial_view_is_centred():
    box = Viewport().crop_box()
    x, y, w, h = box
    assert abs((x + w / 2) - CAMERA_FRAME_WIDTH / 2) <= 1
    assert abs((y + h / 2) - CAMERA_FRAME_HEIGHT / 2) <= 1
    assert box == (640, 390, 640, 300)


def test_scrolling_down_saturates_at_one():
    viewport = Viewport()
    for _ in range(100):
        viewport.scroll(ScrollDirection.DOWN)
        assert _inside_frame(viewport)
    assert viewport.zoom_factor == 1.0


def test_scrolling_up_saturates_at_min():
    viewport = Viewport()
    for _ in range(100):
        viewport.scroll(ScrollDirection.UP)
        assert _inside_frame(viewport)
    assert viewport.zoom_factor == 0.1


def test_scroll_up_shrinks_view():
    viewport = Viewport()
    _, _, w0, h0 = viewport.crop_box()
    viewport.scroll(ScrollDirection.UP)
    _, _, w1, h1 = viewport.crop_box()
    assert w1 < w0 and h1 < h0


@pytest.mark.parametrize("direction", [ScrollDirection.LEFT, ScrollDirection.RIGHT])
def test_sideways_scroll_keeps_zoom(direction):
    viewport = Viewport()
    before = viewport.crop_box()
    viewport.scroll(direction)
    assert viewport.zoom_factor == 0.5
    assert viewport.crop_box() == before


def test_drag_pans_against_motion():
    viewport = Viewport()
    x0, y0, _, _ = viewport.crop_box()
    viewport.press(100, 100)
    viewport.move(90, 95)
    x1, y1, _, _ = viewport.crop_box()
    assert (x1, y1) == (x0 + 10, y0 + 5)


def test_press_selects_row():
    viewport = Viewport()
    viewport.press(12.7, 42.9)
    assert viewport.clicked_row == 42
    assert viewport.moving


def test_move_without_press_does_not_pan():
    viewport = Viewport()
    before = viewport.crop_box()
    viewport.move(500, 500)
    viewport.move(0, 0)
    assert viewport.crop_box() == before


def test_release_stops_panning():
    viewport = Viewport()
    viewport.press(100, 100)
    viewport.release()
    before = viewport.crop_box()
    viewport.move(0, 0)
    assert viewport.crop_box() == before
    assert not viewport.moving


def test_drag_is_clamped_to_frame():
    viewport = Viewport()
    viewport.press(0, 0)
    viewport.move(-10000, -10000)
    x, y, w, h = viewport.crop_box()
    assert x == CAMERA_FRAME_WIDTH - w
    assert y == CAMERA_FRAME_HEIGHT - h
    viewport.move(20000, 20000)
    x, y, _, _ = viewport.crop_box()
    assert (x, y) == (0, 0)


def test_zoom_after_drag_stays_inside():
    viewport = Viewport()
    viewport.press(0, 0)
    viewport.move(-10000, -10000)
    viewport.release()
    for _ in range(60):
        viewport.scroll(ScrollDirection.DOWN)
        x, y, w, h = viewport.crop_box()
        assert x >= 0
        assert y >= 0
        assert x + w <= CAMERA_FRAME_WIDTH
        assert y + h <= CAMERA_FRAME_HEIGHT
    assert viewport.zoom_factor == 1.0