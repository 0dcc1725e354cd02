"""Drawable rectangles, images, text and buttons."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

import pygame

from ores.color import Color
from ores.font_cache import FontCache, FontLoadError
from ores.game_object import CompositeGameObject, GameObject

_log = logging.getLogger(__name__)


class Rectangle(GameObject):
    """A filled, possibly translucent rectangle."""

    def __init__(self, x: float, y: float, width: float, height: float, color: Color = Color()) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.color = color

    def intersects(self, x: float, y: float) -> bool:
        """Return True if the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def set_alpha(self, alpha: int) -> None:
        """Change only the alpha of the rectangle's colour."""
        self.color = replace(self.color, alpha=alpha)

    def draw(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
        if rect.width <= 0 or rect.height <= 0:
            return
        if self.color.alpha >= 0xFF:
            surface.fill(self.color.to_tuple()[:3], rect)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(self.color.to_tuple())
        surface.blit(overlay, rect.topleft)


class Image(GameObject):
    """A texture drawn stretched to its width and height."""

    def __init__(
        self,
        texture: Optional[pygame.Surface] = None,
        x: float = 0.0,
        y: float = 0.0,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        super().__init__()
        self.texture = texture
        self.x = x
        self.y = y
        self.width = float(width if width is not None else (texture.get_width() if texture else 0))
        self.height = float(height if height is not None else (texture.get_height() if texture else 0))

    def draw(self, surface: pygame.Surface) -> None:
        if self.texture is None:
            return
        size = (int(self.width), int(self.height))
        if size[0] <= 0 or size[1] <= 0:
            return
        texture = self.texture
        if texture.get_size() != size:
            texture = pygame.transform.scale(texture, size)
        surface.blit(texture, (int(self.x), int(self.y)))

    def close(self) -> None:
        self.texture = None
        super().close()


class Text(Image):
    """A line of text rendered once into a texture."""

    def __init__(
        self,
        font_cache: FontCache,
        font_filename: Optional[str],
        font_size: int,
        text: str,
        x: float,
        y: float,
        color: Color,
    ) -> None:
        super().__init__(None, x, y)
        try:
            font = font_cache.load_font(font_filename, font_size)
        except FontLoadError as exc:
            _log.warning("%s", exc)
            return
        try:
            texture = font.render(text, False, color.to_tuple())
        except pygame.error as exc:
            _log.warning("unable to render text surface: %s", exc)
            return
        self.texture = texture
        self.width = float(texture.get_width())
        self.height = float(texture.get_height())

    def center_at(self, x: float, y: float, width: float, height: float) -> None:
        """Place the text in the middle of the given rectangle."""
        self.x = x + width / 2.0 - self.width / 2.0
        self.y = y + height / 2.0 - self.height / 2.0


class Button(CompositeGameObject):
    """A rectangle with centred text that calls back when clicked."""

    def __init__(
        self,
        font_cache: FontCache,
        x: float,
        y: float,
        width: float,
        height: float,
        background_color: Color,
        font_filename: Optional[str],
        font_size: int,
        text: str,
        text_color: Color,
        callback: Callable[[], object],
    ) -> None:
        super().__init__()
        self._callback = callback
        self._rectangle = Rectangle(x, y, width, height, background_color)
        self.add_game_object(self._rectangle)
        self.text = Text(font_cache, font_filename, font_size, text, 0, 0, text_color)
        self.text.center_at(x, y, width, height)
        self.add_game_object(self.text)

    @property
    def rectangle(self) -> Rectangle:
        """The button's background rectangle."""
        return self._rectangle

    def on_click(self, x: int, y: int) -> None:
        if self._rectangle.intersects(x, y):
            self._callback()