"""RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """An RGBA colour; black and fully opaque unless given otherwise."""

    red: int = 0x00
    green: int = 0x00
    blue: int = 0x00
    alpha: int = 0xFF

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Return the colour as an ``(r, g, b, a)`` tuple."""
        return (self.red, self.green, self.blue, self.alpha)