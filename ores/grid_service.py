"""Game rules acting on a grid model."""

from __future__ import annotations

import random
from collections import deque
from typing import Callable, List, Optional, Tuple

from ores.events import Event
from ores.model import COLOR_COUNT, COLUMN_COUNT, ROW_COUNT, Box, GridModel

# Columns left of this one start empty when a game begins.
_FIRST_FILLED_COLUMN = 5


def _in_bounds(column: int, row: int) -> bool:
    return 0 <= column < COLUMN_COUNT and 0 <= row < ROW_COUNT


class GridService:
    """Starts games, pops groups of boxes and pushes new columns in."""

    def __init__(self, grid_model: GridModel, rng: Optional[random.Random] = None) -> None:
        self._model = grid_model
        self._rng = rng if rng is not None else random.Random()
        self._last_box_id = -1
        self._boxes_popped = Event()
        self._new_column_added = Event()
        self._game_over = Event()

    def _new_box(self, column: int, row: int) -> Box:
        self._last_box_id += 1
        return Box(self._last_box_id, self._rng.randrange(COLOR_COUNT), column, row)

    def start_game(self) -> None:
        """Fill the right half of the grid with random boxes and clear the rest."""
        for column, cells in enumerate(self._model.boxes):
            for row in range(len(cells)):
                cells[row] = (
                    None if column < _FIRST_FILLED_COLUMN else self._new_box(column, row)
                )

    def try_pop_box_at(self, column: int, row: int) -> List[int]:
        """Pop the box at a cell with its same-coloured neighbours.

        Nothing happens unless at least two boxes are connected. Returns
        the ids of the popped boxes, in the order they were found.
        """
        boxes = self._model.boxes
        if not _in_bounds(column, row) or boxes[column][row] is None:
            return []

        color = boxes[column][row].color
        to_pop: List[Tuple[int, int]] = [(column, row)]
        visited = {(column, row)}
        frontier = deque(to_pop)

        while frontier:
            c, r = frontier.popleft()
            for cell in ((c - 1, r), (c + 1, r), (c, r - 1), (c, r + 1)):
                if not _in_bounds(*cell) or cell in visited:
                    continue
                visited.add(cell)
                neighbour = boxes[cell[0]][cell[1]]
                if neighbour is not None and neighbour.color == color:
                    to_pop.append(cell)
                    frontier.append(cell)

        if len(to_pop) <= 1:
            return []

        popped_ids = []
        for c, r in to_pop:
            popped_ids.append(boxes[c][r].id)
            boxes[c][r] = None

        self._boxes_popped.notify(list(popped_ids))
        self._update_boxes_position()
        return popped_ids

    def insert_new_column(self) -> None:
        """Shift every column left and add a full new column on the right.

        If the bottom-left cell is occupied the game is over instead.
        """
        boxes = self._model.boxes
        if boxes[0][0] is not None:
            self._game_over.notify()
            return

        for column in range(1, len(boxes)):
            for row, box in enumerate(boxes[column]):
                if box is None:
                    break
                box.update_grid_position(column - 1, row)
                boxes[column - 1][row] = box
                boxes[column][row] = None

        last = len(boxes) - 1
        for row in range(len(boxes[last])):
            boxes[last][row] = self._new_box(last, row)

        self._new_column_added.notify()

    def _update_boxes_position(self) -> None:
        """Let boxes fall into gaps and close empty columns towards the right."""
        boxes = self._model.boxes
        columns_removed = 0

        for column in reversed(range(COLUMN_COUNT)):
            column_empty = True
            rows_removed = 0

            for row in range(ROW_COUNT):
                box = boxes[column][row]
                if box is None:
                    rows_removed += 1
                    continue

                column_empty = False
                if columns_removed == 0 and rows_removed == 0:
                    continue

                new_column = column + columns_removed
                new_row = row - rows_removed
                box.update_grid_position(new_column, new_row)
                boxes[new_column][new_row] = box
                boxes[column][row] = None

            if column_empty:
                columns_removed += 1

    def attach_boxes_popped_observer(self, observer: Callable[[List[int]], object]) -> None:
        self._boxes_popped.attach(observer)

    def detach_boxes_popped_observer(self, observer: Callable[[List[int]], object]) -> None:
        self._boxes_popped.detach(observer)

    def attach_new_column_added_observer(self, observer: Callable[[], object]) -> None:
        self._new_column_added.attach(observer)

    def detach_new_column_added_observer(self, observer: Callable[[], object]) -> None:
        self._new_column_added.detach(observer)

    def attach_game_over_observer(self, observer: Callable[[], object]) -> None:
        self._game_over.attach(observer)

    def detach_game_over_observer(self, observer: Callable[[], object]) -> None:
        self._game_over.detach(observer)