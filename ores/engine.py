"""The window, the frame loop and the current scene."""

from __future__ import annotations

import time
from typing import Optional, Tuple

import pygame

from ores.game_object import GameObject

FRAME_TIME = 1.0 / 60.0
"""Target seconds between two frames."""

_BACKGROUND = (0x00, 0x00, 0x00)


class EngineError(RuntimeError):
    """Raised when the display or fonts cannot be started."""


class Engine:
    """Owns the window and drives the current scene frame by frame.

    With no ``size`` the window fills the desktop.
    """

    def __init__(self, size: Optional[Tuple[int, int]] = None, title: str = "Ores") -> None:
        self._size = size
        self._title = title
        self._surface: Optional[pygame.Surface] = None
        self._scene: Optional[GameObject] = None
        self._looping = False

    @property
    def surface(self) -> pygame.Surface:
        """The window surface everything is drawn on."""
        if self._surface is None:
            raise RuntimeError("the engine is not initialised")
        return self._surface

    @property
    def scene(self) -> Optional[GameObject]:
        return self._scene

    @property
    def looping(self) -> bool:
        return self._looping

    def init(self) -> None:
        """Open the window and start the font system."""
        try:
            pygame.init()
            if self._size is None:
                surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            else:
                surface = pygame.display.set_mode(self._size)
            pygame.display.set_caption(self._title)
        except pygame.error as exc:
            raise EngineError(f"window could not be created: {exc}") from exc
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise EngineError(f"fonts could not be initialised: {exc}") from exc
        self._surface = surface

    def load_scene(self, scene: Optional[GameObject]) -> None:
        """Close the current scene and show ``scene`` instead."""
        previous = self._scene
        self._scene = scene
        if previous is not None and previous is not scene:
            previous.close()

    def loop(self) -> None:
        """Run frames until the loop is stopped or the window is closed."""
        last_frame = time.perf_counter()
        self._looping = True

        while self._looping:
            self._handle_input()

            current_frame = time.perf_counter()
            self._update(current_frame - last_frame)
            self._draw()

            last_frame = current_frame
            wait = FRAME_TIME - (time.perf_counter() - last_frame)
            if wait > 0:
                time.sleep(wait)

    def stop_loop(self) -> None:
        """Stop the loop after the current frame."""
        self._looping = False

    def close(self) -> None:
        """Close the scene and shut the window down."""
        scene, self._scene = self._scene, None
        if scene is not None:
            scene.close()
        self._surface = None
        pygame.font.quit()
        pygame.display.quit()
        pygame.quit()

    def resolution(self) -> Tuple[int, int]:
        """Return the window's ``(width, height)``."""
        return self.surface.get_size()

    def _update(self, elapsed_time: float) -> None:
        if self._scene is not None:
            self._scene.update(elapsed_time)

    def _draw(self) -> None:
        surface = self.surface
        surface.fill(_BACKGROUND)
        if self._scene is not None:
            self._scene.draw(surface)
        pygame.display.flip()

    def _handle_input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONUP and self._scene is not None:
                x, y = event.pos
                self._scene.on_click(x, y)
            if event.type == pygame.QUIT:
                self._looping = False