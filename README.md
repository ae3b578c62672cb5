# lifeterm

Conway's Game of Life in your terminal. The whole terminal window is the
board. You draw cells with the mouse and then watch them evolve.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
lifeterm
```

The game takes over the terminal. It switches to raw input and the alternate
screen, and it restores the terminal when you quit. It needs a POSIX terminal
(it uses `termios`) that is at least three rows tall. If the game cannot start,
the error is printed to standard error.

The game starts paused. The top two lines show the generation, the population
and the speed. A help line sits at the bottom. The rows in between are the
board.

| Input        | Action                                                  |
|--------------|---------------------------------------------------------|
| left click   | toggle a cell (mouse reporting is on while paused)      |
| `p`          | pause or resume the simulation                          |
| `+`          | speed up (speed ranges from 1 to 100, starting at 50)   |
| `-`          | slow down                                               |
| `q`, Ctrl-C  | quit and restore the terminal                           |

While the game runs, one generation is drawn every `(8 * delay + 250)`
milliseconds, where the delay is `100 - speed`.

Cells outside the board do not exist. Edges do not wrap around, so a cell on
the border has fewer neighbours.

### Limitations

The board size is read once, when the game starts. If you resize the terminal
during play, the board does not follow. There is no way to save or load a
pattern, and the game does not run on terminals without `termios`.

## Using the board in code

`lifeterm.grid.Grid` holds the board and works without a terminal:

```python
from lifeterm.grid import Grid

grid = Grid(100, 100)
for cell in [(10, 10), (10, 11), (10, 12)]:
    grid.toggle_cell(cell)

grid.next_generation()
assert grid.population == 3
assert grid[(9, 11)] and grid[(10, 11)] and grid[(11, 11)]
assert grid.generation == 1
```

Indices are `(column, row)` pairs, counted from the top-left corner. An index
outside the board raises `IndexError`, and a negative size raises `ValueError`.
`toggle_cell` keeps `population` up to date. Assigning with
`grid[index] = value` leaves the count alone.

`lifeterm.printer` produces the status text: `format_generation`,
`format_population` and `format_speed`. `format_speed` raises `ValueError` for
a delay outside 0 to 100. `print_generation`, `print_population` and
`print_speed` write that text to a stream at its place on the screen.

`lifeterm.app` holds the interactive parts:

- `parse_events(data)` turns raw terminal input (bytes or str) into `KeyEvent`
  and `MouseClick` values. It keeps only key presses and left-button presses.
- `Game(stream, width, height)` holds the board, the pause state and the delay.
  It draws on `stream` through `handle_key`, `handle_click`, `step` and
  `draw_ribbons`.
- `run(stream=None)` plays on the controlling terminal, and `main()` is the
  entry point behind the `lifeterm` command.