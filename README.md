# schulte

A Schulte table puzzle. A square grid of numbered cells (3×3 by default) is
shown in shuffled order. Click the numbers in ascending order, starting at 1,
as fast as you can.

- The timer starts when you click 1 and pauses when the last number is
  clicked.
- A correct click flashes the cell green, then fades it to grey.
- A wrong click flashes the cell red, then fades it back to its normal colour.
- Cells you have already cleared ignore hovering and further clicks.

The elapsed time appears above the grid as `MM:SS.mmm` (whole hours wrap
around). Each click is also logged to the console.

## Installation

```
pip install .
```

This needs `pygame`, which is installed automatically.

## Playing

```
schulte
```

A resizable window opens with the grid. Close the window to quit.

Options:

- `--grid-size N` — side length of the grid (default 3). It must be between
  1 and 15.
- `--seed N` — seed for the shuffle, to get the same board again.

## Using it as a library

The game logic works without a display; `pygame` is only imported when the
window is opened.

```python
from schulte.counter import SequentialCounter, Correct, Incorrect
from schulte.timer import GameplayTimer, format_elapsed

counter = SequentialCounter(9)
assert counter.check_cell(1) == Correct(is_first=True)
assert counter.check_cell(3) == Incorrect()

timer = GameplayTimer()
timer.resume().tick_duration(61.5)
assert format_elapsed(timer.elapsed) == "01:01.500"
```

The modules:

- `schulte.counter` — `SequentialCounter`, whose `check_cell` returns
  `Correct`, `Visited` or `Incorrect`.
- `schulte.timer` — `GameplayTimer`, a chainable stopwatch in seconds, and
  `format_elapsed`.
- `schulte.colors` — the board's `Color` values, `ease_cubic_in` and
  `ColorTween`.
- `schulte.layers` — a small UI node tree: `Node`, `UiRoot` with its
  built-in layers (`BuiltInUiLayer`), `UiLayerKey` and `build_ui_root`.
- `schulte.board` — `build_main_panel`, `build_board`, `shuffled_indexes`
  and `SchulteBoard`, whose `layout` and `cell_at` place cells in an area and
  find the cell under a point.
- `schulte.game` — `SchulteGame`, which puts the board, counter and timer
  together. Its `set_interaction`, `handle_click`, `handle_hover`, `update`
  and `timer_text` methods are what the window uses each frame; `main` runs
  the window.

## What it does not do

There is a single round per run: after the last number there is no restart
button or new board, and times are not saved anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```