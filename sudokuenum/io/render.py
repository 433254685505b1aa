"""Box-drawing rendering of grids and solutions."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.grid import Grid
from ..core.solved import SolvedGrid
from ..domains import Digit

EMPTY_CELL = "."

TOP_LEFT, TOP_TEE, TOP_RIGHT = "┌", "┬", "┐"
LEFT_TEE, CROSS, RIGHT_TEE = "├", "┼", "┤"
BOTTOM_LEFT, BOTTOM_TEE, BOTTOM_RIGHT = "└", "┴", "┘"
HORIZONTAL, VERTICAL = "─", "│"


def _border(left: str, tee: str, right: str, block_side: int) -> str:
    return left + tee.join(HORIZONTAL * block_side for _ in range(block_side)) + right + "\n"


def _row_line(row: Sequence[Optional[Digit]], block_side: int) -> str:
    glyphs = [EMPTY_CELL if cell is None else cell.symbol for cell in row]
    blocks = [
        "".join(glyphs[start:start + block_side])
        for start in range(0, len(glyphs), block_side)
    ]
    return VERTICAL + VERTICAL.join(blocks) + VERTICAL + "\n"


def render(grid: Union[Grid, SolvedGrid]) -> str:
    """Draw ``grid`` with a border around every block; empty cells show as ``.``."""
    b = grid.block_side
    rows = grid.rows()
    bands = [
        "".join(_row_line(row, b) for row in rows[start:start + b])
        for start in range(0, len(rows), b)
    ]
    return (
        _border(TOP_LEFT, TOP_TEE, TOP_RIGHT, b)
        + _border(LEFT_TEE, CROSS, RIGHT_TEE, b).join(bands)
        + _border(BOTTOM_LEFT, BOTTOM_TEE, BOTTOM_RIGHT, b)
    )
