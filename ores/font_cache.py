"""Loading fonts once per file and size."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame


class FontLoadError(OSError):
    """Raised when a font file cannot be loaded."""


class FontCache:
    """Keeps loaded fonts keyed by filename and size.

    A filename of ``None`` selects the default font.
    """

    def __init__(self) -> None:
        self._fonts: Dict[Tuple[Optional[str], int], pygame.font.Font] = {}

    def __len__(self) -> int:
        return len(self._fonts)

    def load_font(self, filename: Optional[str], size: int) -> pygame.font.Font:
        """Return the font for ``filename`` at ``size``, loading it if needed."""
        key = (filename, size)
        font = self._fonts.get(key)
        if font is not None:
            return font

        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(filename, size)
        except (OSError, pygame.error) as exc:
            raise FontLoadError(f"unable to load font {filename}: {exc}") from exc

        self._fonts[key] = font
        return font

    def close(self) -> None:
        """Forget every loaded font."""
        self._fonts.clear()