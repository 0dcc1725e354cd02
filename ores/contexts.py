"""The main menu scene and the game scene."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, Type, TypeVar

from ores.color import Color
from ores.font_cache import FontCache
from ores.game_object import CompositeGameObject, GameObject
from ores.grid_display import GridUiDisplay
from ores.grid_service import GridService
from ores.model import NEW_COLUMN_TIME, GridModel
from ores.registry import Registry
from ores.shapes import Button, Text
from ores.timer_display import TimerUiDisplay

FONT_FILE: Optional[str] = None
"""Font used for all text; ``None`` selects pygame's built-in font."""

_BUTTON_FONT_SIZE = 28
_TITLE_FONT_SIZE = 72

_WHITE = Color(0xFF, 0xFF, 0xFF)
_BLACK = Color(0x00, 0x00, 0x00)
_RED = Color(0xFF, 0x00, 0x00)

T = TypeVar("T")


class SceneHost(Protocol):
    """What a scene needs from the engine that shows it."""

    def resolution(self) -> Tuple[int, int]: ...

    def load_scene(self, scene: Optional[GameObject]) -> None: ...

    def stop_loop(self) -> None: ...


def _require(registry: Registry, kind: Type[T]) -> T:
    instance = registry.get(kind)
    if instance is None:
        raise LookupError(f"no {kind.__name__} is registered")
    return instance


class GameContext(CompositeGameObject):
    """The playing scene: grid, new-column timer and a way back to the menu."""

    def __init__(self, engine: SceneHost, font_cache: FontCache, registry: Registry) -> None:
        super().__init__()
        self._engine = engine
        self._font_cache = font_cache
        self._registry = registry
        grid_model = _require(registry, GridModel)
        self._grid_service = _require(registry, GridService)

        width, height = engine.resolution()

        self.menu_button = Button(
            font_cache, width - 400 - 10, 10, 400, 100, _WHITE,
            FONT_FILE, _BUTTON_FONT_SIZE, "MAIN MENU", _BLACK, self._back_to_menu,
        )
        self.add_game_object(self.menu_button)

        self.grid_display = GridUiDisplay(grid_model, self._grid_service, width, height)
        self.add_game_object(self.grid_display)

        self.timer = TimerUiDisplay(
            width / 2.0 - 250, 100, 500, 75, _WHITE, _BLACK, _WHITE,
            NEW_COLUMN_TIME, self._grid_service.insert_new_column,
        )
        self.add_game_object(self.timer)

        self._grid_service.attach_game_over_observer(self.on_game_over)

    def _back_to_menu(self) -> None:
        self._engine.load_scene(MetaContext(self._engine, self._font_cache, self._registry))

    def on_game_over(self) -> None:
        """Stop the timer and show the game-over message."""
        self.timer.stop_timer()
        width, height = self._engine.resolution()
        text = Text(self._font_cache, FONT_FILE, _TITLE_FONT_SIZE, "GAME OVER", 0, 0, _RED)
        text.center_at(0, 0, width, height)
        self.add_game_object(text)

    def close(self) -> None:
        self._grid_service.detach_game_over_observer(self.on_game_over)
        super().close()


class MetaContext(CompositeGameObject):
    """The main menu: title, play and quit."""

    def __init__(self, engine: SceneHost, font_cache: FontCache, registry: Registry) -> None:
        super().__init__()
        self._engine = engine
        self._font_cache = font_cache
        self._registry = registry

        width, height = engine.resolution()

        self.title = Text(font_cache, FONT_FILE, _TITLE_FONT_SIZE, "ORES", 0, 0, _RED)
        self.title.center_at(0, 0, width, height / 2.0)
        self.add_game_object(self.title)

        self.play_button = Button(
            font_cache, width / 2.0 - 200, height / 2.0, 400, 100, _WHITE,
            FONT_FILE, _BUTTON_FONT_SIZE, "PLAY", _BLACK, self._play,
        )
        self.add_game_object(self.play_button)

        self.quit_button = Button(
            font_cache, width / 2.0 - 200, height / 2.0 + 150, 400, 100, _WHITE,
            FONT_FILE, _BUTTON_FONT_SIZE, "QUIT", _BLACK, engine.stop_loop,
        )
        self.add_game_object(self.quit_button)

    def _play(self) -> None:
        _require(self._registry, GridService).start_game()
        self._engine.load_scene(GameContext(self._engine, self._font_cache, self._registry))