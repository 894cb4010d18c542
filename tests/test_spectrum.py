import numpy as np
import pytest

from rascam.spectrum import analysis_row, extract_view, row_profile
from rascam.viewport import CAMERA_FRAME_HEIGHT, CAMERA_FRAME_WIDTH, ScrollDirection, Viewport


def _frame(color):
    frame = np.zeros((CAMERA_FRAME_HEIGHT, CAMERA_FRAME_WIDTH, 3), dtype=np.uint8)
    frame[:, :] = color
    return frame


def test_extract_view_has_requested_size():
    view = extract_view(_frame((10, 20, 30)), Viewport(), (200, 100))
    assert view.shape == (100, 200, 3)


def test_extract_view_default_size():
    view = extract_view(_frame((1, 2, 3)), Viewport())
    assert view.shape == (600, 1280, 3)


def test_extract_view_keeps_uniform_color():
    view = extract_view(_frame((10, 20, 30)), Viewport(), (64, 32))
    pixels = {tuple(p) for p in view.reshape(-1, 3).tolist()}
    assert pixels == {(10, 20, 30)}


def test_extract_view_takes_the_viewport_region():
    frame = _frame((0, 0, 0))
    viewport = Viewport()
    x, y, w, h = viewport.crop_box()
    frame[y : y + h, x : x + w] = (200, 200, 200)
    view = extract_view(frame, viewport, (50, 40))
    assert int(view.min()) == 200
    assert int(view.max()) == 200


def test_extract_view_after_zoom_out():
    viewport = Viewport()
    for _ in range(100):
        viewport.scroll(ScrollDirection.DOWN)
    view = extract_view(_frame((7, 7, 7)), viewport, (40, 20))
    assert int(view.min()) == 7
    assert int(view.max()) == 7


def test_extract_view_rejects_small_frame():
    small = np.zeros((100, 100, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        extract_view(small, Viewport(), (10, 10))


def test_row_profile_averages_channels():
    image = np.zeros((4, 3, 3), dtype=np.uint8)
    image[2] = [(30, 60, 90), (0, 0, 3), (255, 255, 255)]
    assert row_profile(image, 2).tolist() == [60, 1, 255]


def test_row_profile_uniform_row_is_identity():
    image = np.zeros((5, 8, 3), dtype=np.uint8)
    image[1, :, :] = np.arange(8, dtype=np.uint8)[:, None] * 30
    assert row_profile(image, 1).tolist() == [0, 30, 60, 90, 120, 150, 180, 210]


def test_row_profile_ignores_alpha():
    image = np.zeros((2, 2, 4), dtype=np.uint8)
    image[0] = [(9, 9, 9, 255), (3, 3, 3, 0)]
    assert row_profile(image, 0).tolist() == [9, 3]


def test_row_profile_length_matches_width():
    image = np.zeros((10, 37, 3), dtype=np.uint8)
    assert len(row_profile(image, 0)) == 37


@pytest.mark.parametrize("row", [-1, 10])
def test_row_profile_rejects_out_of_range(row):
    with pytest.raises(IndexError):
        row_profile(np.zeros((10, 5, 3), dtype=np.uint8), row)


def test_analysis_row_defaults_to_middle():
    image = np.zeros((600, 10, 3), dtype=np.uint8)
    assert analysis_row(image, -1) == 300


def test_analysis_row_uses_click():
    image = np.zeros((600, 10, 3), dtype=np.uint8)
    assert analysis_row(image, 17) == 17