"""Base classes for everything the engine updates and draws."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import pygame


class Animation(ABC):
    """Something that changes a game object over time."""

    @abstractmethod
    def update(self, elapsed_time: float) -> bool:
        """Advance by ``elapsed_time`` seconds; return True when finished."""


class GameObject(ABC):
    """An object that can be drawn, updated, clicked and animated."""

    def __init__(self) -> None:
        self._animation: Optional[Animation] = None

    @property
    def animation(self) -> Optional[Animation]:
        return self._animation

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the object onto ``surface``."""

    def update(self, elapsed_time: float) -> None:
        """Advance the current animation and drop it once it is done."""
        if self._animation is not None and self._animation.update(elapsed_time):
            self._animation = None

    def on_click(self, x: int, y: int) -> None:
        """Handle a click at ``(x, y)``; does nothing by default."""

    def set_animation(self, animation: Optional[Animation]) -> None:
        """Replace the current animation."""
        self._animation = animation

    def close(self) -> None:
        """Release what the object holds."""
        self._animation = None


class CompositeGameObject(GameObject):
    """A game object made of other game objects."""

    def __init__(self) -> None:
        super().__init__()
        self.game_objects: List[GameObject] = []
        self._to_remove: List[GameObject] = []

    def add_game_object(self, game_object: Optional[GameObject]) -> None:
        """Add a child; ``None`` is ignored."""
        if game_object is not None:
            self.game_objects.append(game_object)

    def remove_game_object_after_update(self, game_object: Optional[GameObject]) -> None:
        """Schedule a child for removal once the current update is over."""
        if game_object is not None:
            self._to_remove.append(game_object)

    def remove_game_objects_after_update(self) -> None:
        """Remove and close every child scheduled for removal."""
        for game_object in self._to_remove:
            try:
                self.game_objects.remove(game_object)
            except ValueError:
                continue
            game_object.close()
        self._to_remove.clear()

    def draw(self, surface: pygame.Surface) -> None:
        for game_object in list(self.game_objects):
            game_object.draw(surface)

    def update(self, elapsed_time: float) -> None:
        for game_object in list(self.game_objects):
            game_object.update(elapsed_time)
        self.remove_game_objects_after_update()

    def on_click(self, x: int, y: int) -> None:
        for game_object in list(self.game_objects):
            game_object.on_click(x, y)

    def close(self) -> None:
        """Close every child and forget them."""
        for game_object in self.game_objects:
            game_object.close()
        self.game_objects.clear()
        self._to_remove.clear()
        super().close()