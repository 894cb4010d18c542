"""Cropping the visible view out of a camera frame and reading an intensity profile."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .viewport import SPECTRUM_AREA_HEIGHT, SPECTRUM_AREA_WIDTH, Viewport


def extract_view(
    frame: np.ndarray,
    viewport: Viewport,
    size: tuple[int, int] = (SPECTRUM_AREA_WIDTH, SPECTRUM_AREA_HEIGHT),
) -> np.ndarray:
    """Crop the viewport's region from ``frame`` and scale it bilinearly to ``size`` (width, height)."""
    frame_height, frame_width = frame.shape[:2]
    x, y, w, h = viewport.crop_box()
    if w <= 0 or h <= 0 or x < 0 or y < 0 or x + w > frame_width or y + h > frame_height:
        raise ValueError(
            f"crop box {(x, y, w, h)} does not fit in a {frame_width}x{frame_height} frame"
        )
    crop = np.ascontiguousarray(frame[y : y + h, x : x + w], dtype=np.uint8)
    resized = Image.fromarray(crop).resize(tuple(size), Image.Resampling.BILINEAR)
    return np.asarray(resized)


def row_profile(image: np.ndarray, row: int) -> np.ndarray:
    """Return the mean of the first three channels of each pixel in ``row``."""
    height = image.shape[0]
    if not 0 <= row < height:
        raise IndexError(f"row {row} outside image of height {height}")
    pixels = image[row, :, :3].astype(np.int32)
    return (pixels.sum(axis=1) // 3).astype(np.uint8)


def analysis_row(image: np.ndarray, clicked_row: int) -> int:
    """Return the row to analyse: the clicked one, or the middle row when none is chosen."""
    if clicked_row < 0:
        return image.shape[0] // 2
    return clicked_row