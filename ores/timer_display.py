"""A bar that empties over time and calls back when it runs out."""

from __future__ import annotations

from typing import Callable

from ores.color import Color
from ores.game_object import CompositeGameObject
from ores.shapes import Rectangle


class TimerUiDisplay(CompositeGameObject):
    """A bordered bar that shrinks and restarts each time its time runs out."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        border_color: Color,
        background_color: Color,
        timer_color: Color,
        time: float,
        callback: Callable[[], object],
    ) -> None:
        super().__init__()
        self._initial_time = float(time)
        self._current_time = float(time)
        self._max_bar_width = width - 8
        self._callback = callback
        self._running = True

        self.add_game_object(Rectangle(x, y, width, height, border_color))
        self.add_game_object(Rectangle(x + 2, y + 2, width - 4, height - 4, background_color))
        self._bar = Rectangle(x + 4, y + 4, width - 8, height - 8, timer_color)
        self.add_game_object(self._bar)

    @property
    def bar(self) -> Rectangle:
        """The shrinking inner rectangle."""
        return self._bar

    @property
    def current_time(self) -> float:
        """Seconds left before the next callback."""
        return self._current_time

    @property
    def running(self) -> bool:
        return self._running

    def stop_timer(self) -> None:
        """Stop counting down."""
        self._running = False

    def update(self, elapsed_time: float) -> None:
        super().update(elapsed_time)
        if not self._running:
            return

        self._current_time -= elapsed_time
        if self._current_time <= 0:
            self._callback()
            self._current_time += self._initial_time

        self._bar.width = self._max_bar_width * self._current_time / self._initial_time