from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Type

from ..domains import Digit, Domain
from .grid import Grid
from .model import InvariantError, Position
from .partial import PartialAssignment


@dataclass(frozen=True)
class SolvedGrid:
    """Immutable snapshot of a fully and consistently filled grid."""
    domain: Type[Domain]
    cells: Tuple[Digit, ...]

    @classmethod
    def from_partial(cls, state: PartialAssignment) -> "SolvedGrid":
        if not state.is_full():
            raise InvariantError(
                f"cursor at {state.fill_until}, a solution needs {len(state.grid)}"
            )
        if not state.grid.is_complete():
            raise InvariantError("fully decided grid has an empty cell")
        clashes = state.grid.conflicts()
        if clashes:
            raise InvariantError(f"fully decided grid repeats digits at positions {clashes}")
        return cls(state.grid.domain, tuple(state.grid.cells))

    @property
    def block_side(self) -> int:
        return self.domain.block_side

    @property
    def side(self) -> int:
        return self.domain.side()

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Digit]:
        return iter(self.cells)

    def __getitem__(self, pos: Position) -> Digit:
        return self.cells[pos]

    def rows(self) -> List[List[Digit]]:
        side = self.side
        return [list(self.cells[r * side:(r + 1) * side]) for r in range(side)]

    def to_values(self) -> List[int]:
        return [d.rank for d in self.cells]

    def to_grid(self) -> Grid:
        return Grid(self.domain, list(self.cells))
