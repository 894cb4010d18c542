"""Point lists for drawing the intensity profile panel."""

from __future__ import annotations

from collections.abc import Iterable

from .viewport import HISTOGRAM_HEIGHT, HISTOGRAM_WIDTH

Point = tuple[int, int]


def outline_points(width: int = HISTOGRAM_WIDTH, height: int = HISTOGRAM_HEIGHT) -> list[Point]:
    """Return the closed rectangle drawn around the panel."""
    return [(0, 0), (0, height), (width, height), (width, 0), (0, 0)]


def profile_points(values: Iterable[int], height: int = HISTOGRAM_HEIGHT) -> list[Point]:
    """Return the profile polyline: a start at mid-height, then one point per value."""
    points: list[Point] = [(0, height // 2)]
    points.extend((column, int(value)) for column, value in enumerate(values))
    return points