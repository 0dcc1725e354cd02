"""On-screen rectangle that follows a box in the grid."""

from __future__ import annotations

from typing import Protocol

from ores.animations import BoxMoveAnimation
from ores.config import box_color
from ores.model import Box
from ores.shapes import Rectangle

_ENTER_DURATION = 1.0
_MOVE_DURATION = 0.5


class _PopService(Protocol):
    def try_pop_box_at(self, column: int, row: int) -> object: ...


class BoxUiDisplay(Rectangle):
    """Draws a box, pops it when clicked and glides after it when it moves."""

    def __init__(
        self,
        box: Box,
        grid_service: _PopService,
        x_coord_on_zero: float,
        y_coord_on_zero: float,
        box_dimension: float,
        initial_x_offset: float = 0.0,
        initial_y_offset: float = 0.0,
    ) -> None:
        super().__init__(
            x_coord_on_zero + box_dimension * box.column,
            y_coord_on_zero - box_dimension * box.row,
            box_dimension,
            box_dimension,
            box_color(box.color),
        )
        self._box = box
        self._grid_service = grid_service
        self._x_coord_on_zero = x_coord_on_zero
        self._y_coord_on_zero = y_coord_on_zero
        box.attach_position_observer(self.on_box_position_updated)

        if initial_x_offset != 0 or initial_y_offset != 0:
            final_x, final_y = self.x, self.y
            self.x += initial_x_offset
            self.y += initial_y_offset
            self.set_animation(BoxMoveAnimation(self, final_x, final_y, _ENTER_DURATION))

    @property
    def box(self) -> Box:
        return self._box

    def on_click(self, x: int, y: int) -> None:
        if self.intersects(x, y):
            self._grid_service.try_pop_box_at(self._box.column, self._box.row)

    def on_box_position_updated(self, column: int, row: int) -> None:
        """Start moving to the cell the box now occupies."""
        x = self._x_coord_on_zero + self.width * column
        y = self._y_coord_on_zero - self.height * row
        self.set_animation(BoxMoveAnimation(self, x, y, _MOVE_DURATION))

    def close(self) -> None:
        self._box.detach_position_observer(self.on_box_position_updated)
        super().close()