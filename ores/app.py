"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence, Tuple

from ores.contexts import MetaContext
from ores.engine import Engine, EngineError
from ores.font_cache import FontCache
from ores.grid_service import GridService
from ores.model import GridModel
from ores.registry import Registry


def build_registry(rng: Optional[random.Random] = None) -> Registry:
    """Create the grid model and its service and register both."""
    grid_model = GridModel()
    grid_service = GridService(grid_model, rng)
    registry = Registry()
    registry.add(GridModel, grid_model)
    registry.add(GridService, grid_service)
    return registry


def _parse_size(value: str) -> Tuple[int, int]:
    width, sep, height = value.lower().partition("x")
    try:
        size = (int(width), int(height))
    except ValueError:
        size = None
    if not sep or size is None or size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    return size


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the window is closed or Quit is chosen."""
    parser = argparse.ArgumentParser(
        prog="ores", description="Pop groups of coloured boxes before the grid fills up."
    )
    parser.add_argument(
        "--size", type=_parse_size, default=None,
        help="window size as WIDTHxHEIGHT; fills the desktop when omitted",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for box colours")
    args = parser.parse_args(argv)

    engine = Engine(args.size)
    font_cache = FontCache()
    registry = build_registry(random.Random(args.seed))

    try:
        engine.init()
    except EngineError as exc:
        print(f"ores: {exc}", file=sys.stderr)
        return 1

    try:
        engine.load_scene(MetaContext(engine, font_cache, registry))
        engine.loop()
    finally:
        engine.close()
        font_cache.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())