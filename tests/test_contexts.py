import random

import pytest

from ores.contexts import GameContext, MetaContext
from ores.font_cache import FontCache
from ores.grid_display import GridUiDisplay
from ores.grid_service import GridService
from ores.model import COLUMN_COUNT, NEW_COLUMN_TIME, ROW_COUNT, Box, GridModel
from ores.registry import Registry
from ores.shapes import Text
from ores.timer_display import TimerUiDisplay


class FakeEngine:
    def __init__(self, size=(1920, 1080)):
        self.size = size
        self.scene = None
        self.stopped = False

    def resolution(self):
        return self.size

    def load_scene(self, scene):
        previous, self.scene = self.scene, scene
        if previous is not None and previous is not scene:
            previous.close()

    def stop_loop(self):
        self.stopped = True


@pytest.fixture
def setup():
    model = GridModel()
    service = GridService(model, random.Random(7))
    registry = Registry()
    registry.add(GridModel, model)
    registry.add(GridService, service)
    return FakeEngine(), FontCache(), registry, model, service


def _click_center(scene, button):
    r = button.rectangle
    scene.on_click(int(r.x + r.width / 2), int(r.y + r.height / 2))


def test_menu_quit_stops_the_loop(setup):
    engine, fonts, registry, _, _ = setup
    meta = MetaContext(engine, fonts, registry)
    engine.load_scene(meta)
    _click_center(meta, meta.quit_button)
    assert engine.stopped is True
    assert engine.scene is meta


def test_menu_play_starts_game(setup):
    engine, fonts, registry, model, _ = setup
    meta = MetaContext(engine, fonts, registry)
    engine.load_scene(meta)
    _click_center(meta, meta.play_button)
    assert isinstance(engine.scene, GameContext)
    assert engine.stopped is False
    assert meta.game_objects == []
    assert all(model.box_at(c, r) is not None for c in range(5, COLUMN_COUNT) for r in range(ROW_COUNT))
    assert all(model.box_at(c, r) is None for c in range(5) for r in range(ROW_COUNT))


def test_menu_title_is_centered_in_top_half(setup):
    engine, fonts, registry, _, _ = setup
    meta = MetaContext(engine, fonts, registry)
    width, height = engine.size
    assert meta.title.x + meta.title.width / 2 == pytest.approx(width / 2)
    assert meta.title.y + meta.title.height / 2 == pytest.approx(height / 4)


def test_game_context_layout(setup):
    engine, fonts, registry, model, service = setup
    service.start_game()
    ctx = GameContext(engine, fonts, registry)
    assert ctx.game_objects == [ctx.menu_button, ctx.grid_display, ctx.timer]
    assert isinstance(ctx.grid_display, GridUiDisplay)
    assert isinstance(ctx.timer, TimerUiDisplay)
    count = sum(box is not None for column in model.boxes for box in column)
    assert len(ctx.grid_display.box_displays) == count


def test_timer_inserts_new_column(setup):
    engine, fonts, registry, model, service = setup
    service.start_game()
    ctx = GameContext(engine, fonts, registry)
    before = len(ctx.grid_display.box_displays)
    ctx.update(NEW_COLUMN_TIME)
    assert len(ctx.grid_display.box_displays) == before + ROW_COUNT
    assert all(model.box_at(COLUMN_COUNT - 1, r) is not None for r in range(ROW_COUNT))


def test_game_over_stops_timer_and_shows_text(setup):
    engine, fonts, registry, model, service = setup
    model.boxes[0][0] = Box(500, 1, 0, 0)
    ctx = GameContext(engine, fonts, registry)
    service.insert_new_column()
    assert ctx.timer.running is False
    assert ctx.grid_display.box_displays == {}
    text = ctx.game_objects[-1]
    assert isinstance(text, Text)
    width, height = engine.size
    assert text.x + text.width / 2 == pytest.approx(width / 2)
    assert text.y + text.height / 2 == pytest.approx(height / 2)


def test_main_menu_button_returns_to_menu_and_detaches(setup):
    engine, fonts, registry, model, service = setup
    ctx = GameContext(engine, fonts, registry)
    engine.load_scene(ctx)
    _click_center(ctx, ctx.menu_button)
    assert isinstance(engine.scene, MetaContext)
    assert ctx.game_objects == []
    model.boxes[0][0] = Box(500, 1, 0, 0)
    service.insert_new_column()
    assert ctx.game_objects == []


def test_game_context_requires_registered_service(setup):
    engine, fonts, _, _, _ = setup
    with pytest.raises(LookupError):
        GameContext(engine, fonts, Registry())