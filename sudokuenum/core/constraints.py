"""Row, column and block position arithmetic for row-major grids."""

from __future__ import annotations

from typing import List, Set

from .model import Position


def row_positions(pos: Position, block_side: int) -> List[Position]:
    side = block_side * block_side
    first = pos // side * side
    return [first + column for column in range(side)]


def column_positions(pos: Position, block_side: int) -> List[Position]:
    side = block_side * block_side
    first = pos % side
    return [first + row * side for row in range(side)]


def block_positions(pos: Position, block_side: int) -> List[Position]:
    side = block_side * block_side
    top = pos // side // block_side * block_side
    left = pos % side // block_side * block_side
    return [
        (top + y) * side + left + x
        for y in range(block_side)
        for x in range(block_side)
    ]


def units(pos: Position, block_side: int) -> List[List[Position]]:
    """The three units (row, column, block) containing ``pos``."""
    return [
        row_positions(pos, block_side),
        column_positions(pos, block_side),
        block_positions(pos, block_side),
    ]


def peers(pos: Position, block_side: int) -> Set[Position]:
    result = set()
    for unit in units(pos, block_side):
        result.update(unit)
    result.discard(pos)
    return result
