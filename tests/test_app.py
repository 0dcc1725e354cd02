import random

import pytest

from ores.app import build_registry, main
from ores.grid_service import GridService
from ores.model import GridModel


def _colors(model):
    return [[box.color if box is not None else None for box in column] for column in model.boxes]


def test_registry_holds_model_and_service():
    registry = build_registry(random.Random(1))
    assert GridModel in registry
    assert GridService in registry
    assert len(registry) == 2


def test_service_acts_on_registered_model():
    registry = build_registry(random.Random(1))
    model = registry.get(GridModel)
    assert model.box_at(9, 0) is None
    registry.get(GridService).start_game()
    assert model.box_at(9, 0) is not None
    assert model.box_at(0, 0) is None


def test_same_seed_gives_same_grid():
    first = build_registry(random.Random(42))
    second = build_registry(random.Random(42))
    first.get(GridService).start_game()
    second.get(GridService).start_game()
    assert _colors(first.get(GridModel)) == _colors(second.get(GridModel))


def test_each_registry_has_its_own_model():
    first = build_registry(random.Random(5))
    second = build_registry(random.Random(5))
    first.get(GridService).start_game()
    assert second.get(GridModel).box_at(9, 0) is None


@pytest.mark.parametrize("size", ["oops", "800", "0x600", "800x-1"])
def test_invalid_size_is_rejected(size):
    with pytest.raises(SystemExit) as info:
        main(["--size", size])
    assert info.value.code == 2