"""A colour matching puzzle game on a grid of boxes, drawn with pygame."""

__version__ = "0.1.0"