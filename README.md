# lifegrid

An interactive Conway's Game of Life built on pygame. The grid sits in a
window below a toolbar. You can draw cells, start and pause the
simulation, pan and zoom the field, and switch between a dark and a light
colour theme.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
lifegrid
```

The window size and the grid size come from arguments of the form
`-<letter><NUMBER>`:

| Argument     | Meaning                              | Default |
|--------------|--------------------------------------|---------|
| `-w<NUMBER>` | window width in pixels               | 1200    |
| `-h<NUMBER>` | window height in pixels              | 1000    |
| `-x<NUMBER>` | number of cells across (along x)     | 20      |
| `-y<NUMBER>` | number of cells down (along y)       | 20      |

For example:

```
lifegrid -w800 -h600 -x40 -y40
```

`NUMBER` must be an unsigned whole number that fits in 32 bits. If it
can't be read, a message is printed and the default is kept. An argument
of three or more characters that is not one of these options is reported
as not a parameter and ignored; shorter arguments are ignored silently.

The toolbar icons are loaded from `assets/dark/` and `assets/light/`,
relative to the current directory. Each folder must hold
`icon-play.png`, `icon-pause.png`, `icon-pencil.png`, `icon-paint.png`,
`icon-broom.png`, `icon-swap.png`, `icon-home.png` and `icon-help.png`;
a missing icon stops start-up with `FileNotFoundError`.

The help screen uses `/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf`
when that file exists and pygame's default font otherwise.

## Controls

| Input        | Action                                                   |
|--------------|----------------------------------------------------------|
| `Space`      | play / pause the simulation                              |
| `D`          | toggle draw mode                                         |
| `C`          | clear the grid                                           |
| `T`          | switch the colour theme                                  |
| `H`          | return the field to its home position and scale          |
| `F1`         | show the help screen                                     |
| `Q`          | quit the game; on the help screen, go back to the game   |
| Left click   | press a toolbar button; in draw mode, toggle a cell      |
| Left drag    | pan the field (when the drag starts below the toolbar)   |
| Mouse wheel  | zoom around the pointer (when it is below the toolbar)   |

The toolbar buttons, from left to right, are play/pause, draw mode,
clear, switch theme, home and help. While playing, the grid advances
one generation about every eleven frames at 60 frames per second. Cells
beyond the edge of the grid count as dead.

## Using it as a library

The simulation parts do not need a window:

```python
from lifegrid.grid import Cell, Grid
from lifegrid.game import next_generation

grid = Grid(5, 5)
for col in (1, 2, 3):
    grid.set(Cell.ALIVE, 2, col)

grid = next_generation(grid)   # the blinker flips: (1, 2), (2, 2), (3, 2) are alive
```

- `lifegrid.grid` — `Cell` (`DEAD`, `ALIVE`) and `Grid` with `get`, `set`,
  `size`, `neighbours`, `copy` and `Grid.from_cells`. Positions outside
  the grid raise `IndexError`.
- `lifegrid.game` — `count_of_alive(grid, row, col)`,
  `next_generation(grid)` and the interactive `GameOfLife`.
- `lifegrid.args` — `read_command_line_args(argv)` returns a `Settings`
  value with `width`, `height`, `cellx` and `celly`; `parse_param(s)`
  reads the number after a two-character prefix or returns `None`.
- `lifegrid.palette` — the `DARK_PALETTE` and `LIGHT_PALETTE` colours,
  `current()`, `set_dark()`, `set_light()` and `set_other()`.
- `lifegrid.field` — `Field`, the pan and zoom state (`shift`, `zoom`,
  `home`).
- `lifegrid.double_buf` — `DoubleBuf`, a pair of values with `current()`,
  `back()` and `switch()`.
- `lifegrid.app` — `main(argv)`, `run(settings, screen, textures)` and
  `load_textures(assets_dir)`.

## What it does not do

The grid has a fixed size and does not wrap around at its edges. Patterns
cannot be saved or loaded, and the zoom has no upper or lower limit.