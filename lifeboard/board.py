"""The grid of cells and the rules that advance it one generation."""

from __future__ import annotations

import random
from collections.abc import Iterator
from os import PathLike

from lifeboard.cell import Cell, CellState

_DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Board:
    """A bounded grid of cells following Conway's rules."""

    def __init__(self, rows: int, columns: int, rng: random.Random | None = None) -> None:
        self.rows = rows
        self.columns = columns
        self.generations = 0
        self._rng = rng if rng is not None else random.Random()
        self._grid = [
            [self._new_cell(i, j) for j in range(columns)] for i in range(rows)
        ]

    def __iter__(self) -> Iterator[Cell]:
        for row in self._grid:
            yield from row

    def _new_cell(self, row: int, column: int, state: CellState = CellState.DEAD) -> Cell:
        return Cell(row, column, state, rng=self._rng)

    def _in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def cell_at(self, row: int, column: int) -> Cell:
        """The cell at the given position."""
        if not self._in_bounds(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the board")
        return self._grid[row][column]

    def update(self, random_colors: bool, trail_colors: bool) -> None:
        """Commit pending transitions of every cell and recolour them."""
        for cell in self:
            cell.update(random_colors, trail_colors)

    def _live_neighbors(self, row: int, column: int) -> int:
        return sum(
            1
            for dr, dc in _DIRECTIONS
            if self._in_bounds(row + dr, column + dc)
            and self._grid[row + dr][column + dc].is_alive()
        )

    def process_generation(self) -> None:
        """Mark each cell's transition for the next generation."""
        for cell in self:
            neighbors = self._live_neighbors(cell.row, cell.column)
            if cell.is_alive():
                if neighbors < 2 or neighbors > 3:
                    cell.state = CellState.ALIVE_TO_DEAD
            elif neighbors == 3:
                cell.state = CellState.DEAD_TO_ALIVE
        self.generations += 1

    def toggle_cell_at(self, x: float, y: float) -> None:
        """Flip the cell under the screen point (x, y), if any."""
        for cell in self:
            if cell.rect().contains(x, y):
                cell.state = CellState.DEAD if cell.is_alive() else CellState.ALIVE

    def load_random(self) -> None:
        """Fill the board with randomly live and dead cells."""
        self.generations = 0
        self._grid = [
            [
                self._new_cell(i, j, CellState.DEAD if self._rng.randrange(2) == 0 else CellState.ALIVE)
                for j in range(self.columns)
            ]
            for i in range(self.rows)
        ]

    def load_blank(self) -> None:
        """Make every cell dead."""
        self.generations = 0
        self._grid = [
            [self._new_cell(i, j) for j in range(self.columns)] for i in range(self.rows)
        ]

    def load_preset(self, path: str | PathLike[str]) -> None:
        """Load a preset file: '.' is a live cell, '*' a dead one, one line per row.

        Cells the file does not mention keep their state. Raises OSError if the
        file cannot be read and ValueError if the pattern does not fit the board.
        """
        self.generations = 0
        with open(path, "rb") as stream:
            data = stream.read()
        row = column = 0
        for byte in data:
            if byte in (ord("*"), ord(".")):
                if not self._in_bounds(row, column):
                    raise ValueError(
                        f"preset cell ({row}, {column}) does not fit a "
                        f"{self.rows}x{self.columns} board"
                    )
                state = CellState.ALIVE if byte == ord(".") else CellState.DEAD
                self._grid[row][column] = self._new_cell(row, column, state)
                column += 1
            elif byte == ord("\n"):
                row += 1
                column = 0