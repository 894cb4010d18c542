"""Geometry and the zoom/pan viewport over a camera frame."""

from __future__ import annotations

import enum

MAIN_WINDOW_WIDTH = 1280

HISTOGRAM_WIDTH = MAIN_WINDOW_WIDTH
HISTOGRAM_HEIGHT = 256

SPECTRUM_AREA_WIDTH = MAIN_WINDOW_WIDTH
SPECTRUM_AREA_HEIGHT = 600

MAIN_WINDOW_HEIGHT = SPECTRUM_AREA_HEIGHT + HISTOGRAM_HEIGHT

CAMERA_FRAME_WIDTH = 1920
CAMERA_FRAME_HEIGHT = 1080

MIN_ZOOM = 0.1
MAX_ZOOM = 1.0
ZOOM_STEP = 0.01


class ScrollDirection(enum.Enum):
    """Direction of a mouse-wheel step."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Viewport:
    """The visible part of the camera frame, moved by dragging and zoomed by scrolling.

    ``zoom_factor`` is the fraction of the display size taken from the camera
    frame: smaller values show a smaller region, i.e. zoom in.
    """

    def __init__(self, zoom_factor: float = 0.5) -> None:
        self.zoom_factor = zoom_factor
        self.scaled_width, self.scaled_height = self._scaled_size()
        self.x = int(CAMERA_FRAME_WIDTH // 2 - self.scaled_width / 2)
        self.y = int(CAMERA_FRAME_HEIGHT // 2 - self.scaled_height / 2)
        self.moving = False
        self.clicked_row = -1
        self._prev_x = 0.0
        self._prev_y = 0.0

    def _scaled_size(self) -> tuple[float, float]:
        width = min(SPECTRUM_AREA_WIDTH * self.zoom_factor, float(CAMERA_FRAME_WIDTH))
        height = min(SPECTRUM_AREA_HEIGHT * self.zoom_factor, float(CAMERA_FRAME_HEIGHT))
        return width, height

    def scroll(self, direction: ScrollDirection) -> None:
        """Zoom out one step on DOWN, in one step on UP, keeping the view centred."""
        if direction is ScrollDirection.DOWN:
            if self.zoom_factor >= MAX_ZOOM:
                self.zoom_factor = MAX_ZOOM
                return
            self.zoom_factor += ZOOM_STEP
        elif direction is ScrollDirection.UP:
            if self.zoom_factor <= MIN_ZOOM:
                self.zoom_factor = MIN_ZOOM
                return
            self.zoom_factor -= ZOOM_STEP

        previous_width, previous_height = self.scaled_width, self.scaled_height
        self.scaled_width, self.scaled_height = self._scaled_size()

        self.x = int(self.x + (previous_width - self.scaled_width) / 2.0)
        self.y = int(self.y + (previous_height - self.scaled_height) / 2.0)

        self.x = max(self.x, 0)
        self.y = max(self.y, 0)
        if self.x + self.scaled_width > CAMERA_FRAME_WIDTH:
            self.x = int(CAMERA_FRAME_WIDTH - self.scaled_width)
        if self.y + self.scaled_height > CAMERA_FRAME_HEIGHT:
            self.y = int(CAMERA_FRAME_HEIGHT - self.scaled_height)

    def press(self, x: float, y: float) -> None:
        """Start a drag at (x, y) and select row ``y`` for analysis."""
        self.moving = True
        self._prev_x = x
        self._prev_y = y
        self.clicked_row = int(y)

    def release(self) -> None:
        """End a drag."""
        self.moving = False

    def move(self, x: float, y: float) -> None:
        """Track the pointer; while dragging, pan the view against its motion."""
        if self.moving:
            self.x = int(self.x + (self._prev_x - x))
            self.y = int(self.y + (self._prev_y - y))

            if self.x + self.scaled_width >= CAMERA_FRAME_WIDTH:
                self.x = int(CAMERA_FRAME_WIDTH - self.scaled_width)
            if self.y + self.scaled_height >= CAMERA_FRAME_HEIGHT:
                self.y = int(CAMERA_FRAME_HEIGHT - self.scaled_height)

            self.x = max(self.x, 0)
            self.y = max(self.y, 0)

        self._prev_x = x
        self._prev_y = y

    def crop_box(self) -> tuple[int, int, int, int]:
        """Return the visible region of the camera frame as (x, y, width, height)."""
        return self.x, self.y, int(self.scaled_width), int(self.scaled_height)