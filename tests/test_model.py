import pytest

from ores.model import COLUMN_COUNT, ROW_COUNT, Box, GridModel


def test_box_keeps_its_fields():
    box = Box(7, 2, 3, 4)

    assert (box.id, box.color, box.column, box.row) == (7, 2, 3, 4)


def test_update_grid_position_moves_box_and_notifies():
    box = Box(1, 0, 5, 5)
    moves = []
    box.attach_position_observer(lambda column, row: moves.append((column, row)))

    box.update_grid_position(6, 2)

    assert (box.column, box.row) == (6, 2)
    assert moves == [(6, 2)]


def test_detached_observer_is_not_notified():
    box = Box(1, 0, 5, 5)
    moves = []

    def observer(column, row):
        moves.append((column, row))

    box.attach_position_observer(observer)
    box.detach_position_observer(observer)
    box.update_grid_position(1, 1)

    assert moves == []
    assert (box.column, box.row) == (1, 1)


def test_detach_of_unknown_observer_keeps_others():
    box = Box(1, 0, 0, 0)
    moves = []
    box.attach_position_observer(lambda column, row: moves.append(column))
    box.detach_position_observer(lambda column, row: None)

    box.update_grid_position(2, 0)

    assert moves == [2]


def test_id_and_color_are_read_only():
    box = Box(1, 0, 0, 0)

    with pytest.raises(AttributeError):
        box.color = 3
    with pytest.raises(AttributeError):
        box.id = 9

    assert (box.id, box.color) == (1, 0)


def test_new_grid_is_empty():
    model = GridModel()

    assert len(model.boxes) == COLUMN_COUNT
    assert all(len(column) == ROW_COUNT for column in model.boxes)
    assert all(
        model.box_at(column, row) is None
        for column in range(COLUMN_COUNT)
        for row in range(ROW_COUNT)
    )


def test_box_at_returns_placed_box():
    model = GridModel()
    box = Box(3, 1, 2, 5)
    model.boxes[2][5] = box

    assert model.box_at(2, 5) is box


@pytest.mark.parametrize(
    "column, row",
    [(-1, 0), (0, -1), (COLUMN_COUNT, 0), (0, ROW_COUNT)],
)
def test_box_at_outside_grid_raises(column, row):
    model = GridModel()

    with pytest.raises(IndexError):
        model.box_at(column, row)