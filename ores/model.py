"""Game balancing values, boxes and the grid that holds them."""

from __future__ import annotations

from typing import Callable, List, Optional

from ores.events import Event

COLUMN_COUNT = 10
"""Total number of columns."""

ROW_COUNT = 10
"""Total number of rows."""

COLOR_COUNT = 5
"""Total number of colors."""

NEW_COLUMN_TIME = 7
"""Seconds before a new column appears."""


class Box:
    """A coloured box that sits in a grid cell."""

    def __init__(self, box_id: int, color: int, column: int, row: int) -> None:
        self._id = box_id
        self._color = color
        self._column = column
        self._row = row
        self._position_updated = Event()

    def __repr__(self) -> str:
        return f"Box(id={self._id}, color={self._color}, column={self._column}, row={self._row})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def color(self) -> int:
        return self._color

    @property
    def column(self) -> int:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    def update_grid_position(self, column: int, row: int) -> None:
        """Move the box and tell its position observers."""
        self._column = column
        self._row = row
        self._position_updated.notify(column, row)

    def attach_position_observer(self, observer: Callable[[int, int], object]) -> None:
        """Call ``observer(column, row)`` whenever the box moves."""
        self._position_updated.attach(observer)

    def detach_position_observer(self, observer: Callable[[int, int], object]) -> None:
        """Stop calling ``observer`` when the box moves."""
        self._position_updated.detach(observer)


class GridModel:
    """A grid of columns, each holding a box or ``None`` per row."""

    def __init__(self) -> None:
        self.boxes: List[List[Optional[Box]]] = [
            [None] * ROW_COUNT for _ in range(COLUMN_COUNT)
        ]

    def box_at(self, column: int, row: int) -> Optional[Box]:
        """Return the box in a cell, or ``None`` if the cell is empty."""
        if not (0 <= column < len(self.boxes) and 0 <= row < len(self.boxes[column])):
            raise IndexError(f"cell ({column}, {row}) is outside the grid")
        return self.boxes[column][row]