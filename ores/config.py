"""Presentation settings."""

from __future__ import annotations

from ores.color import Color

BOX_COLORS = (
    Color(0xFF, 0x00, 0x00),
    Color(0x00, 0xFF, 0x00),
    Color(0x00, 0x00, 0xFF),
    Color(0xFF, 0xFF, 0x00),
    Color(0xFF, 0x00, 0xFF),
)
"""Display colour for each box colour code."""


def box_color(color_code: int) -> Color:
    """Return the display colour for a box colour code."""
    if not 0 <= color_code < len(BOX_COLORS):
        raise IndexError(f"no colour for code {color_code}")
    return BOX_COLORS[color_code]