"""The main window: a live camera view with an intensity profile of one row above it."""

from __future__ import annotations

import argparse
import contextlib
import os
from collections.abc import Callable

import numpy as np
import pygame

from .histogram import outline_points, profile_points
from .logger import Logger
from .spectrum import analysis_row, extract_view, row_profile
from .viewport import (
    CAMERA_FRAME_HEIGHT,
    CAMERA_FRAME_WIDTH,
    HISTOGRAM_HEIGHT,
    HISTOGRAM_WIDTH,
    MAIN_WINDOW_HEIGHT,
    MAIN_WINDOW_WIDTH,
    SPECTRUM_AREA_HEIGHT,
    SPECTRUM_AREA_WIDTH,
    ScrollDirection,
    Viewport,
)

DEFAULT_LOG_PATH = "/mnt/ramdisk/log.txt"
REFRESH_MS = 10

X_INITIAL = 1
X_FINAL = 2

BACKGROUND = (255, 255, 255)
OUTLINE_COLOUR = (255, 0, 0)
PROFILE_COLOUR = (0, 0, 0)

FrameSource = Callable[[], "np.ndarray | None"]


class _CameraSource:
    """Frames from the first (or chosen) camera, as (height, width, 3) RGB arrays."""

    def __init__(self, index: int = 0) -> None:
        import pygame.camera

        pygame.camera.init()
        names = pygame.camera.list_cameras()
        if not names:
            raise RuntimeError("no camera found")
        if not 0 <= index < len(names):
            raise RuntimeError(f"camera {index} not found; {len(names)} available")
        self._size = (CAMERA_FRAME_WIDTH, CAMERA_FRAME_HEIGHT)
        self._camera = pygame.camera.Camera(names[index], self._size, "RGB")
        self._camera.start()

    def __call__(self) -> np.ndarray | None:
        surface = self._camera.get_image()
        if surface is None:
            return None
        if surface.get_size() != self._size:
            surface = pygame.transform.smoothscale(surface, self._size)
        return pygame.surfarray.array3d(surface).swapaxes(0, 1)

    def close(self) -> None:
        self._camera.stop()


class MainWindow:
    """State and behaviour of the application window.

    The profile panel sits on top, the camera view below it.  Mouse input over
    the camera view pans, zooms and selects the row whose profile is shown.
    """

    def __init__(
        self,
        width: int = MAIN_WINDOW_WIDTH,
        height: int = MAIN_WINDOW_HEIGHT,
        frame_source: FrameSource | None = None,
        log_path: str | os.PathLike[str] = DEFAULT_LOG_PATH,
    ) -> None:
        self.size = (width, height)
        self.viewport = Viewport()
        self.histogram = np.zeros(HISTOGRAM_WIDTH, dtype=np.uint8)
        self.view: np.ndarray | None = None
        self.fullscreen = False
        self.setting_area = False
        self.setting_area_state = X_INITIAL
        self.running = True
        self.frame_source = frame_source
        self._screen: pygame.Surface | None = None

        self.logger = Logger.instance()
        self.logger.set_path(log_path)
        with contextlib.suppress(OSError):
            self.logger.clear()
            self.logger.write("Hola")

    # -- input -------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one pygame event; return True if it was acted upon."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.key, event.mod)
        if event.type == pygame.MOUSEWHEEL:
            if event.y > 0:
                self.viewport.scroll(ScrollDirection.UP)
            elif event.y < 0:
                self.viewport.scroll(ScrollDirection.DOWN)
            elif event.x > 0:
                self.viewport.scroll(ScrollDirection.RIGHT)
            elif event.x < 0:
                self.viewport.scroll(ScrollDirection.LEFT)
            return True
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button in (4, 5):
                return False
            x, y = self._to_view(event.pos)
            if not (0 <= x < SPECTRUM_AREA_WIDTH and 0 <= y < SPECTRUM_AREA_HEIGHT):
                return False
            self.viewport.press(x, y)
            return True
        if event.type == pygame.MOUSEBUTTONUP:
            if event.button in (4, 5):
                return False
            self.viewport.release()
            return True
        if event.type == pygame.MOUSEMOTION:
            x, y = self._to_view(event.pos)
            self.viewport.move(x, y)
            return True
        return False

    @staticmethod
    def _to_view(pos: tuple[int, int]) -> tuple[float, float]:
        x, y = pos
        return float(x), float(y - HISTOGRAM_HEIGHT)

    def handle_key(self, key: int, mods: int = 0) -> bool:
        """Ctrl+C quits, F toggles fullscreen, Escape leaves fullscreen."""
        if key == pygame.K_c:
            if mods & pygame.KMOD_CTRL:
                self.running = False
            return True
        if key == pygame.K_f:
            self.fullscreen = not self.fullscreen
            self._apply_display_mode()
            return True
        if key == pygame.K_ESCAPE:
            self.fullscreen = False
            self._apply_display_mode()
            return True
        return False

    def _apply_display_mode(self) -> None:
        if self._screen is not None:
            flags = pygame.FULLSCREEN if self.fullscreen else 0
            self._screen = pygame.display.set_mode(self.size, flags)

    def toggle_analysis_area(self) -> None:
        """Enter or leave analysis-area selection; entering stops the current profile."""
        if self.setting_area:
            self.setting_area = False
        else:
            self.setting_area = True
            self.setting_area_state = X_INITIAL
            self.viewport.clicked_row = -1

    # -- frame processing ----------------------------------------------------

    def update(self, frame: np.ndarray | None) -> None:
        """Take a camera frame: refresh the visible view and the row profile."""
        if frame is None:
            return
        view = extract_view(frame, self.viewport, (SPECTRUM_AREA_WIDTH, SPECTRUM_AREA_HEIGHT))
        row = analysis_row(view, self.viewport.clicked_row)
        profile = row_profile(view, row)
        count = min(len(profile), len(self.histogram))
        self.histogram[:count] = profile[:count]
        self.view = view

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the profile panel and, below it, the current view."""
        surface.fill(BACKGROUND)
        pygame.draw.lines(surface, OUTLINE_COLOUR, False, outline_points(), 5)
        pygame.draw.lines(
            surface, PROFILE_COLOUR, False, profile_points(self.histogram.tolist()), 2
        )
        if self.view is not None:
            image = pygame.surfarray.make_surface(
                np.ascontiguousarray(self.view[:, :, :3]).swapaxes(0, 1)
            )
            surface.blit(image, (0, HISTOGRAM_HEIGHT))

    def run(self) -> int:
        """Open the window and process events and frames until asked to quit."""
        pygame.init()
        camera: _CameraSource | None = None
        try:
            if self.frame_source is None:
                camera = _CameraSource()
                self.frame_source = camera
            pygame.display.set_caption("rascam")
            flags = pygame.FULLSCREEN if self.fullscreen else 0
            self._screen = pygame.display.set_mode(self.size, flags)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.update(self.frame_source())
                self.draw(self._screen)
                pygame.display.flip()
                clock.tick(1000 // REFRESH_MS)
        finally:
            if camera is not None:
                camera.close()
            self._screen = None
            pygame.quit()
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the application."""
    parser = argparse.ArgumentParser(prog="rascam", description="Live camera spectrum viewer.")
    parser.add_argument("--log", default=DEFAULT_LOG_PATH, help="log file path")
    args = parser.parse_args(argv)
    window = MainWindow(MAIN_WINDOW_WIDTH, MAIN_WINDOW_HEIGHT, log_path=args.log)
    return window.run()