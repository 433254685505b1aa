from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence, Tuple, Type

from ..domains import Digit, Domain
from .constraints import block_positions, column_positions, peers, row_positions
from .model import Cell, InconsistentGridError, Position

if TYPE_CHECKING:  # pragma: no cover
    from .csp import GridSolver


@dataclass
class Grid:
    """Row-major array of ``side * side`` cells, each empty or holding a digit.

    A grid built through :meth:`from_values` is guaranteed consistent: no
    digit appears twice in a row, column or block. Consistent does not mean
    solvable.
    """
    domain: Type[Domain]
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * self.domain.cell_count()
        if len(self.cells) != self.domain.cell_count():
            raise ValueError(
                f"a {self.domain.name} grid has {self.domain.cell_count()} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, domain: Type[Domain]) -> "Grid":
        return cls(domain)

    @classmethod
    def from_values(cls, values: Sequence[int], domain: Type[Domain]) -> "Grid":
        """Build a grid from the compact literal form: 0 is empty, k the k-th digit."""
        if len(values) != domain.cell_count():
            raise ValueError(f"expected {domain.cell_count()} values, got {len(values)}")
        cells: List[Cell] = [None if v == 0 else domain.from_rank(v) for v in values]
        grid = cls(domain, cells)
        clashes = grid.conflicts()
        if clashes:
            raise InconsistentGridError(f"repeated digits at positions {clashes}")
        return grid

    def to_values(self) -> List[int]:
        return [0 if c is None else c.rank for c in self.cells]

    @property
    def block_side(self) -> int:
        return self.domain.block_side

    @property
    def side(self) -> int:
        return self.domain.side()

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, pos: Position) -> Cell:
        return self.cells[pos]

    def __setitem__(self, pos: Position, cell: Cell) -> None:
        self.cells[pos] = cell

    def rows(self) -> List[List[Cell]]:
        side = self.side
        return [self.cells[r * side:(r + 1) * side] for r in range(side)]

    def copy(self) -> "Grid":
        return Grid(self.domain, list(self.cells))

    def is_given(self, pos: Position) -> bool:
        return self.cells[pos] is not None

    def is_complete(self) -> bool:
        return all(c is not None for c in self.cells)

    def can_accept(self, digit: Digit, pos: Position) -> bool:
        """True iff ``digit`` is absent from the row, column and block of ``pos``."""
        b = self.block_side
        return (
            all(self.cells[p] != digit for p in row_positions(pos, b))
            and all(self.cells[p] != digit for p in column_positions(pos, b))
            and all(self.cells[p] != digit for p in block_positions(pos, b))
        )

    def conflicts(self) -> List[Tuple[Position, Position]]:
        """Pairs of positions sharing a unit and holding the same digit."""
        clashes = []
        for pos, cell in enumerate(self.cells):
            if cell is None:
                continue
            for other in sorted(peers(pos, self.block_side)):
                if other > pos and self.cells[other] == cell:
                    clashes.append((pos, other))
        return clashes

    def is_consistent(self) -> bool:
        return not self.conflicts()

    def search(self) -> "GridSolver":
        from .csp import GridSolver

        return GridSolver(self)


def grid_from_rows(rows: Iterable[Sequence[int]], domain: Type[Domain]) -> Grid:
    """Compact literal given row by row."""
    values: List[int] = []
    for row in rows:
        values.extend(row)
    return Grid.from_values(values, domain)
