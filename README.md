# debugwarmups

Warm-up exercises for learning to use a debugger, together with a cellular
fire simulation and a few console helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
debugwarmups --name "Your Name"
```

This opens a text menu with two entries:

- **Storytelling** prints a one-line story. The story is picked from a seed
  that is derived from your name.
- **Stack Overflows** asks for confirmation. It then reshuffles the goto table
  and follows it until it loops. The program prints the cycle it found, such as
  `Stack overflow: The cycle is 214->794->...`, and exits with status 1.

You must give `--name`. If you leave the placeholder name in place, choosing a
demo prints an error and the program exits with status 1. Choosing `Quit`, or
answering no when you are asked to pick again, ends the program with status 0.

## Library overview

- `debugwarmups.color.Color`: 24-bit RGB colours.
  - Build one from components with `Color(r, g, b)`, or use `Color.from_hex`,
    `Color.from_hsv` or `Color.random`.
  - Read the parts back with `red()`, `green()`, `blue()`, `to_rgb()` and
    `to_html()`.
  - There are presets such as `Color.WHITE` and `Color.GRAY`.
  - Colours compare and order by their RGB value.
- `debugwarmups.font`: the `FontFamily` and `FontStyle` enums and an immutable
  `Font`.
  - `Font` has `with_family`, `with_style`, `with_size`, `with_color` and
    `library_string()`. The last returns a string such as `"Serif-BOLD-24"`.
  - `family_name` gives the platform font name for a family.
  - `style_name` gives the name of a style.
- `debugwarmups.timer.Timer`: a stopwatch that adds up the time between each
  `start()` and `stop()`. `elapsed()` returns the total in seconds. The clock
  can be replaced, and the timer can be used as a context manager.
- `debugwarmups.scrambling`:
  - `scramble` performs one xorshift step.
  - `Scrambler` is a deterministic source of integers and an in-place
    shuffler.
  - `shuffle_values` shuffles a permutation until a cycle of a given length
    appears.
- `debugwarmups.story`:
  - `tell_story` returns the story fragments for a value, and `story_text`
    returns the whole story as one line.
  - `find_cycle` follows a table to the cycle it falls into.
  - `GOTO_TABLE` is the built-in permutation of 0..1023.
  - `trigger_stack_overflow` and `initiate_stack_overflow` raise
    `StackOverflow`, a `RecursionError` that carries the cycle.
- `debugwarmups.stats`: both functions check whether a random experiment
  matches the probabilities you expect.
  - `chi_squared_is_close` runs a chi-squared test at p = 1e-6 and handles up
    to 30 outcomes.
  - `poisson_is_close` checks each outcome against a limit counted in standard
    deviations.
- `debugwarmups.fire`: works on a grid of temperatures, from 0 to `MAX_TEMP`
  (36).
  - `update_fire` advances the grid one step in place. The grid is a list of
    lists.
  - `validate_fire` rejects temperatures that are out of range.
  - `FireSimulation` holds a world whose bottom row drifts toward a target
    temperature. `toggle()` switches the fire on or off, `step()` advances one
    frame, and `color_at()` maps a cell to its `PALETTE` colour.
- `debugwarmups.console`: `ColorConsole` is a writable text buffer in which
  each run of text keeps the `TextStyle` it was written in.
  - `render_html()` returns the contents as HTML. `flush()` stores that HTML in
    `.html`.
  - `styled()` is a context manager that changes the style for one block.
- `debugwarmups.menu`: `make_selection_from` and `make_file_selection` are
  prompts. You can supply your own input function and output stream.
- `debugwarmups.app`:
  - `AppConfig` holds the menu order, the test barriers and the handler
    sorting.
  - `console_main` runs the menu loop.
  - `main` is the command-line entry point.

Example:

```python
import random
from debugwarmups.fire import MAX_TEMP, update_fire

grid = [[0] * 7 for _ in range(5)]
grid[-1] = [MAX_TEMP] * 7
update_fire(grid, random.Random(1))
```

## What this package does not do

- It has no graphical window. The fire simulation only computes temperatures
  and colours. Nothing draws it on screen, and it has no entry in the command
  line menu.
- The default configuration names more demo files and test files than the
  menu provides. There is no text-conversion demo and no test-runner entry.
- `AppConfig` applies test barriers only when a `barrier` callable is
  supplied. The command line supplies none.