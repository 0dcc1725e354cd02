"""On-screen grid that mirrors the boxes of the grid model."""

from __future__ import annotations

from typing import Dict, Iterable

from ores.animations import BoxDisappearAnimation
from ores.box_display import BoxUiDisplay
from ores.game_object import CompositeGameObject
from ores.grid_service import GridService
from ores.model import COLUMN_COUNT, ROW_COUNT, Box, GridModel
from ores.shapes import Rectangle

_DISAPPEAR_DURATION = 0.5


def _box_dimension(width: float, height: float) -> float:
    if width > 1000 and height > 1000:
        return 100.0
    if width > 500 and height > 500:
        return 50.0
    return 10.0


class GridUiDisplay(CompositeGameObject):
    """Keeps one box display per box and animates pops, new columns and game over."""

    def __init__(
        self,
        grid_data_reader: GridModel,
        grid_service: GridService,
        width: float,
        height: float,
    ) -> None:
        super().__init__()
        self._reader = grid_data_reader
        self._service = grid_service
        self._boxes_by_id: Dict[int, BoxUiDisplay] = {}

        self._box_dimension = _box_dimension(width, height)
        self._grid_x = width / 2.0 - COLUMN_COUNT / 2.0 * self._box_dimension
        self._grid_y = height / 2.0 + ROW_COUNT / 2.0 * self._box_dimension
        self._new_box_y_offset = -self._grid_y

        for column in range(COLUMN_COUNT):
            for row in range(ROW_COUNT):
                box = self._reader.box_at(column, row)
                if box is not None:
                    self._add_box_display(box)

        self._service.attach_boxes_popped_observer(self.on_boxes_popped)
        self._service.attach_new_column_added_observer(self.on_new_column_added)
        self._service.attach_game_over_observer(self.on_game_over)

    @property
    def box_dimension(self) -> float:
        """Width and height of a single box."""
        return self._box_dimension

    @property
    def grid_x(self) -> float:
        """x coordinate of a box in column 0."""
        return self._grid_x

    @property
    def grid_y(self) -> float:
        """y coordinate of a box in row 0."""
        return self._grid_y

    @property
    def box_displays(self) -> Dict[int, BoxUiDisplay]:
        """The current box displays keyed by box id."""
        return dict(self._boxes_by_id)

    def _add_box_display(self, box: Box, y_offset: float = 0.0) -> None:
        display = BoxUiDisplay(
            box,
            self._service,
            self._grid_x,
            self._grid_y,
            self._box_dimension,
            0.0,
            y_offset,
        )
        self.add_game_object(display)
        self._boxes_by_id[box.id] = display

    def _discard_display(self, display: BoxUiDisplay) -> None:
        if display in self.game_objects:
            self.game_objects.remove(display)
        self._add_box_disappear_animation(display)
        display.close()

    def on_boxes_popped(self, popped_ids: Iterable[int]) -> None:
        """Fade out the displays of the popped boxes."""
        for box_id in popped_ids:
            display = self._boxes_by_id.pop(box_id, None)
            if display is not None:
                self._discard_display(display)

    def on_new_column_added(self) -> None:
        """Add displays for the new rightmost column, dropping in from above."""
        column = COLUMN_COUNT - 1
        for row in range(ROW_COUNT):
            box = self._reader.box_at(column, row)
            if box is not None:
                self._add_box_display(box, self._new_box_y_offset)

    def on_game_over(self) -> None:
        """Fade out every box."""
        displays = list(self._boxes_by_id.values())
        self._boxes_by_id.clear()
        for display in displays:
            self._discard_display(display)

    def _add_box_disappear_animation(self, display: BoxUiDisplay) -> None:
        # A separate rectangle added last stays drawn on top of the other boxes.
        rectangle = Rectangle(display.x, display.y, display.width, display.height, display.color)
        rectangle.set_animation(
            BoxDisappearAnimation(
                rectangle,
                _DISAPPEAR_DURATION,
                lambda: self.remove_game_object_after_update(rectangle),
            )
        )
        self.add_game_object(rectangle)

    def close(self) -> None:
        self._service.detach_boxes_popped_observer(self.on_boxes_popped)
        self._service.detach_new_column_added_observer(self.on_new_column_added)
        self._service.detach_game_over_observer(self.on_game_over)
        self._boxes_by_id.clear()
        super().close()