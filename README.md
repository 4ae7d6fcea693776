# lifeboard

Conway's Game of Life in an 800 × 800 pygame window. A 50 × 50 board is drawn
with a margin around it; cells beyond its edges count as dead. A splash screen
is shown for about a second, then a menu where you choose how the board
begins.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
lifeboard
```

The command takes no options apart from `--help`.

## Menu

| Key | Starting board         |
|-----|------------------------|
| 1   | Glider gun preset      |
| 2   | Symmetry acorn preset  |
| 3   | B-heptomino preset     |
| 4   | Random board           |
| 5   | Blank board            |
| Q   | Quit                   |

Closing the window quits as well.

## While the game runs

| Key / mouse | Action                                                   |
|-------------|----------------------------------------------------------|
| P           | Pause or resume. The game starts paused.                 |
| Left click  | Turn a cell on or off. This works only while paused.     |
| C           | Random colours for live cells on or off                  |
| T           | Fading red trails for dead cells on or off               |
| Left arrow  | Slow down: the delay between generations grows by 0.005 s, up to 0.1 s |
| Right arrow | Speed up: the delay shrinks by 0.005 s, down to 0.005 s  |
| M           | Back to the menu                                         |
| Q           | Quit                                                     |

The generation count is shown above the top-left corner of the board, and
"(P)ause" above the top-right corner, in red while paused and white while
running.

## Files the game reads

All paths are relative to the directory the program is started from:

- `../assets/presets/GliderGun.txt`, `../assets/presets/SymmetryAcorn.txt`,
  `../assets/presets/B-Heptomino.txt` – preset boards
- `../assets/fonts/MouldyCheeseRegular.ttf` – font for the on-screen text
- `../assets/res/SplashBackground.png`, `../assets/res/MenuBackground.png` –
  splash and menu images

In a preset file `.` is a live cell, `*` is a dead cell and a newline starts
the next row; every other character is ignored. Cells the file does not
mention keep the state they had.

## What the package does not include

The preset files, the font and the images are not part of the package. When
they are missing the game still runs: the splash and menu screens are plain
black (so you need to know the menu keys above), the text uses pygame's
built-in font, and choosing preset 1, 2 or 3 starts the game with the board
as it already was. A preset with more rows or columns than the board stops
the program with a `ValueError`.

## Using the board without a window

`lifeboard.board.Board` and `lifeboard.cell.Cell` need no display:

```python
from lifeboard.board import Board
from lifeboard.cell import CellState

board = Board(50, 50)
for column in (10, 11, 12):
    board.cell_at(5, column).state = CellState.ALIVE

board.process_generation()
board.update(random_colors=False, trail_colors=False)

print(board.generations)                                  # 1
print([board.cell_at(r, 11).is_alive() for r in (4, 5, 6)])  # [True, True, True]
```

- `process_generation()` marks every cell that will change
  (`CellState.ALIVE_TO_DEAD` or `CellState.DEAD_TO_ALIVE`) and counts one
  generation; `update()` then applies those changes and sets each cell's
  `color`.
- `load_blank()`, `load_random()` and `load_preset(path)` reset the
  generation count. `load_preset` raises `OSError` if the file cannot be
  read.
- `cell_at(row, column)` raises `IndexError` outside the board; iterating
  over a `Board` yields its cells row by row.
- `toggle_cell_at(x, y)` flips the cell under a screen point.
- `Board(rows, columns, rng=random.Random(seed))` makes random boards and
  random colours repeatable.