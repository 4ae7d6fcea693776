"""A single cell of the board: its life state, colour and screen rectangle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

from lifeboard.definitions import (
    BOARD_MARGIN,
    CELL_ALIVE_FILL_COLOR,
    CELL_ALIVE_RANDOM_COLORS,
    CELL_DEAD_FILL_COLOR,
    CELL_DEAD_TRAIL_SHADES,
    CELL_DEFAULT_FILL_COLOR,
    CELL_HEIGHT,
    CELL_OUTLINE_THICKNESS,
    CELL_WIDTH,
)


class CellState(IntEnum):
    """Life state of a cell, including the pending transitions of a generation."""

    DEAD = 0
    ALIVE = 1
    ALIVE_TO_DEAD = 2
    DEAD_TO_ALIVE = 3


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; the left and top edges are inclusive."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return (
            self.left <= x < self.left + self.width
            and self.top <= y < self.top + self.height
        )


class Cell:
    """A cell at a fixed row and column with a life state and a fill colour."""

    __slots__ = ("row", "column", "state", "color", "_dead_shade", "_rng")

    def __init__(
        self,
        row: int,
        column: int,
        state: CellState = CellState.DEAD,
        rng: random.Random | None = None,
    ) -> None:
        self.row = row
        self.column = column
        self.state = state
        self.color: tuple[int, ...] = CELL_DEFAULT_FILL_COLOR
        self._dead_shade = len(CELL_DEAD_TRAIL_SHADES) - 1
        self._rng = rng if rng is not None else random.Random()
        self._update_color(False, False)

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, column={self.column}, state={self.state.name})"

    def is_alive(self) -> bool:
        """True if the cell is alive in the current generation."""
        return self.state in (CellState.ALIVE, CellState.ALIVE_TO_DEAD)

    def will_die(self) -> bool:
        """True if the cell will be dead in the next generation."""
        return self.state in (CellState.DEAD, CellState.ALIVE_TO_DEAD)

    def will_live(self) -> bool:
        """True if the cell will be alive in the next generation."""
        return self.state in (CellState.ALIVE, CellState.DEAD_TO_ALIVE)

    def rect(self) -> Rect:
        """The clickable area of the cell on screen."""
        return Rect(
            left=BOARD_MARGIN + self.column * CELL_WIDTH - CELL_OUTLINE_THICKNESS,
            top=BOARD_MARGIN + self.row * CELL_HEIGHT - CELL_OUTLINE_THICKNESS,
            width=CELL_WIDTH,
            height=CELL_HEIGHT,
        )

    def update(self, random_colors: bool, trail_colors: bool) -> None:
        """Commit any pending transition and recolour the cell."""
        self._update_state()
        self._update_color(random_colors, trail_colors)

    def _update_state(self) -> None:
        if self.state in (CellState.ALIVE, CellState.DEAD_TO_ALIVE):
            self.state = CellState.ALIVE
            self._dead_shade = 0
        else:
            self.state = CellState.DEAD
            if self._dead_shade < len(CELL_DEAD_TRAIL_SHADES) - 1:
                self._dead_shade += 1

    def _update_color(self, random_colors: bool, trail_colors: bool) -> None:
        if self.state is CellState.ALIVE:
            if random_colors:
                self.color = self._rng.choice(CELL_ALIVE_RANDOM_COLORS)
            else:
                self.color = CELL_ALIVE_FILL_COLOR
        elif self.state is CellState.DEAD:
            if trail_colors:
                self.color = CELL_DEAD_TRAIL_SHADES[self._dead_shade]
            else:
                self.color = CELL_DEAD_FILL_COLOR