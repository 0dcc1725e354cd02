"""Animations of box rectangles: fading out and moving."""

from __future__ import annotations

from typing import Callable

from ores.game_object import Animation
from ores.shapes import Rectangle


class BoxDisappearAnimation(Animation):
    """Fades a rectangle out, then calls back."""

    def __init__(self, target: Rectangle, duration: float, callback: Callable[[], object]) -> None:
        self._target = target
        self._duration = duration
        self._callback = callback
        self._elapsed_time = 0.0

    def update(self, elapsed_time: float) -> bool:
        self._elapsed_time += elapsed_time
        if self._elapsed_time >= self._duration:
            self._target.set_alpha(0x00)
            self._callback()
            return True
        self._target.set_alpha(int(0xFF - self._elapsed_time / self._duration * 0xFF))
        return False


class BoxMoveAnimation(Animation):
    """Moves a rectangle in a straight line to a final position."""

    def __init__(self, target: Rectangle, final_x: float, final_y: float, duration: float) -> None:
        self._target = target
        self._initial_x = target.x
        self._initial_y = target.y
        self._final_x = final_x
        self._final_y = final_y
        self._duration = duration
        self._elapsed_time = 0.0

    def update(self, elapsed_time: float) -> bool:
        self._elapsed_time += elapsed_time
        if self._elapsed_time >= self._duration:
            self._target.x = self._final_x
            self._target.y = self._final_y
            return True
        progress = self._elapsed_time / self._duration
        self._target.x = self._initial_x + progress * (self._final_x - self._initial_x)
        self._target.y = self._initial_y + progress * (self._final_y - self._initial_y)
        return False