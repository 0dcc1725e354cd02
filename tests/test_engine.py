import pygame
import pytest

from ores.engine import Engine
from ores.game_object import GameObject


class RecordingScene(GameObject):
    def __init__(self, engine=None, stop_after=None):
        super().__init__()
        self.engine = engine
        self.stop_after = stop_after
        self.updates = []
        self.draws = []
        self.clicks = []
        self.closed = 0

    def draw(self, surface):
        self.draws.append(surface)

    def update(self, elapsed_time):
        super().update(elapsed_time)
        self.updates.append(elapsed_time)
        if self.stop_after is not None and len(self.updates) >= self.stop_after:
            self.engine.stop_loop()

    def on_click(self, x, y):
        self.clicks.append((x, y))

    def close(self):
        self.closed += 1
        super().close()


@pytest.fixture
def engine(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    eng = Engine(size=(320, 240))
    eng.init()
    pygame.event.clear()
    yield eng
    if pygame.get_init():
        eng.close()


def test_resolution_matches_requested_size(engine):
    assert engine.resolution() == (320, 240)


def test_resolution_before_init_raises():
    with pytest.raises(RuntimeError):
        Engine(size=(10, 10)).resolution()


def test_loop_runs_until_stopped(engine):
    scene = RecordingScene(engine, stop_after=2)
    engine.load_scene(scene)
    engine.loop()
    assert len(scene.updates) == 2
    assert len(scene.draws) == 2
    assert all(elapsed >= 0 for elapsed in scene.updates)
    assert scene.draws[0] is engine.surface
    assert engine.looping is False


def test_click_is_passed_to_scene(engine):
    scene = RecordingScene(engine, stop_after=1)
    engine.load_scene(scene)
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(5, 6), button=1))
    engine.loop()
    assert scene.clicks == [(5, 6)]


def test_quit_event_stops_loop(engine):
    scene = RecordingScene()
    engine.load_scene(scene)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.loop()
    assert len(scene.updates) == 1
    assert engine.looping is False


def test_load_scene_closes_previous(engine):
    first = RecordingScene()
    second = RecordingScene()
    engine.load_scene(first)
    engine.load_scene(second)
    assert first.closed == 1
    assert second.closed == 0
    assert engine.scene is second


def test_close_closes_scene_and_display(engine):
    scene = RecordingScene()
    engine.load_scene(scene)
    engine.close()
    assert scene.closed == 1
    assert engine.scene is None
    assert pygame.display.get_init() is False