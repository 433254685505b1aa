"""Resumable backtracking search over the open cells of a grid."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from .grid import Grid
from .model import InvariantError, Position
from .partial import PartialAssignment
from .solved import SolvedGrid


class GridSolver:
    """Lazy iterator over every completion of a starting grid.

    Solutions come out in increasing order when a grid is read as a base-N
    number, most significant cell first. Each ``next()`` resumes from where
    the previous one stopped. Once the search runs dry it stays exhausted.

    The starting grid is only read, to tell givens from guesses; callers
    must not mutate it while the solver is alive.
    """

    def __init__(self, grid: Grid) -> None:
        self.initial_grid = grid
        self.state = PartialAssignment.start(grid)
        self.solutions_found = 0
        self._exhausted = False
        self._logger = logging.getLogger("GridSolver")

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def redecide(self, position: Position) -> bool:
        if self.initial_grid.is_given(position):
            raise InvariantError(f"position {position} is a given and cannot be redecided")
        return self.state.redecide(position)

    def make_progress(self) -> bool:
        """Fill the next cell, or backtrack to the latest guess that can still change.

        Returns False when no guess can change any more: there are no
        further solutions.
        """
        if not self.state.is_full() and self.state.advance():
            return True

        for position in range(self.state.fill_until - 1, -1, -1):
            if self.initial_grid.is_given(position):
                continue
            if self.redecide(position):
                self._logger.debug("backtracked to position %d", position)
                return True
        return False

    def __iter__(self) -> Iterator[SolvedGrid]:
        return self

    def __next__(self) -> SolvedGrid:
        if self._exhausted:
            raise StopIteration
        while not self.state.is_full():
            if not self.make_progress():
                self._finish()
                raise StopIteration

        solution = SolvedGrid.from_partial(self.state)
        self.solutions_found += 1
        self._logger.debug("solution #%d found", self.solutions_found)
        # Move past this solution now so the next call resumes the search.
        if not self.make_progress():
            self._finish()
        return solution

    def _finish(self) -> None:
        self._exhausted = True
        self._logger.info("search exhausted after %d solution(s)", self.solutions_found)


def enumerate_solutions(grid: Grid, limit: Optional[int] = None) -> Iterator[SolvedGrid]:
    """Yield up to ``limit`` solutions of ``grid`` (all of them when None)."""
    if limit is not None and limit <= 0:
        return
    for count, solution in enumerate(GridSolver(grid), start=1):
        yield solution
        if limit is not None and count >= limit:
            return


def count_solutions(grid: Grid, limit: Optional[int] = None) -> int:
    return sum(1 for _ in enumerate_solutions(grid, limit))
