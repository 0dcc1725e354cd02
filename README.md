# ores

A colour matching puzzle game played on a ten by ten grid of coloured boxes,
drawn with pygame.

## How to play

- Click a box to pop it together with every box of the same colour that
  touches it horizontally or vertically. A lone box cannot be popped.
- After a pop, boxes fall down to fill the gaps and empty columns close up
  towards the right.
- A timer bar near the top of the screen runs down over seven seconds. Each
  time it empties, a new column of random boxes drops in on the right and
  the rest of the grid moves one column to the left.
- When a new column is due while the bottom-left cell is occupied, the game
  is over: every box fades out and "GAME OVER" is shown.

The main menu offers **PLAY** and **QUIT**; during a game a **MAIN MENU**
button takes you back.

## Installing

```
pip install .
```

The game needs a display. All text uses pygame's built-in font.

## Running

```
ores
```

Options:

- `--size WIDTHxHEIGHT` opens a window of that size; without it the window
  fills the desktop.
- `--seed N` seeds the random box colours, so a game can be replayed.

Close the window or press **QUIT** to leave.

## Using the pieces

The game rules can be driven without a window:

- `ores.model.GridModel` holds the grid; `GridModel.box_at(column, row)`
  returns the `Box` in a cell, or `None`, and raises `IndexError` outside
  the grid. `ores.model` also holds `COLUMN_COUNT`, `ROW_COUNT`,
  `COLOR_COUNT` and `NEW_COLUMN_TIME`.
- `ores.model.Box` has `id`, `color`, `column` and `row`, and calls
  observers attached with `attach_position_observer` whenever it moves.
- `ores.grid_service.GridService(grid_model, rng=None)` runs the rules:
  `start_game()` fills the right half of the grid, `try_pop_box_at(column,
  row)` pops a group and returns the popped box ids (an empty list when
  nothing is popped), and `insert_new_column()` adds a column or ends the
  game. Observers are attached with `attach_boxes_popped_observer`,
  `attach_new_column_added_observer` and `attach_game_over_observer`, and
  removed with the matching `detach_...` methods.
- `ores.app.build_registry(rng)` creates a model and a service and registers
  them in an `ores.registry.Registry`, looked up by type with
  `registry.get(GridModel)` and `registry.get(GridService)`.

```python
import random
from ores.app import build_registry
from ores.grid_service import GridService
from ores.model import GridModel

registry = build_registry(random.Random(1))
service = registry.get(GridService)
grid = registry.get(GridModel)
service.start_game()
print(grid.box_at(9, 0))
print(service.try_pop_box_at(9, 0))
```

## What it does not do

There is no score, no saved games and no sound: a game lasts until the grid
fills up, and nothing is kept between runs.

## Running the tests

```
pip install .[test]
pytest
```