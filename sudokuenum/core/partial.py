"""Partial assignment: a working grid plus the fill cursor."""

from __future__ import annotations

from dataclasses import dataclass

from .grid import Grid
from .model import CellState, InvariantError, Position


@dataclass
class PartialAssignment:
    """Working copy of a grid with a cursor ``fill_until``.

    Every cell before ``fill_until`` is filled. Cells at or after it are
    either givens or empty. The grid stays consistent throughout.
    """
    grid: Grid
    fill_until: int = 0

    @classmethod
    def start(cls, grid: Grid) -> "PartialAssignment":
        return cls(grid.copy(), 0)

    def is_full(self) -> bool:
        return self.fill_until == len(self.grid)

    def advance(self) -> bool:
        """Decide the cell under the cursor and move past it.

        Returns False, leaving the cell empty, when no digit fits.
        """
        if self.is_full():
            raise InvariantError("cannot advance a fully decided grid")
        pos = self.fill_until
        if self.grid[pos] is None:
            for d in self.grid.domain.digits():
                if self.grid.can_accept(d, pos):
                    self.grid[pos] = d
                    break
            else:
                return False
        self.fill_until += 1
        return True

    def redecide(self, index: Position) -> bool:
        """Replace the guess at ``index`` with the next digit that fits.

        On success the cursor moves to just after ``index``. On failure the
        cell is left empty and the cursor retreats to ``index``.
        """
        if index >= self.fill_until:
            raise InvariantError(f"position {index} is not decided yet (cursor at {self.fill_until})")
        previous = self.grid[index]
        if previous is None:
            raise InvariantError(f"position {index} holds no guess to redecide")
        self.grid[index] = None
        for d in self.grid.domain.after(previous):
            if self.grid.can_accept(d, index):
                self.grid[index] = d
                self.fill_until = index + 1
                return True
        self.fill_until = index
        return False

    def state_of(self, pos: Position, origin: Grid) -> CellState:
        if origin.is_given(pos):
            return CellState.GIVEN
        if self.grid[pos] is None:
            return CellState.EMPTY
        return CellState.GUESS
