from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml

from ..core.grid import Grid
from ..domains import get_domain

EMPTY_MARKS = {".", "0"}


class PuzzleFormatError(ValueError):
    """A puzzle document that does not describe a consistent grid."""


@dataclass
class Puzzle:
    grid: Grid
    limit: Optional[int] = None
    step: bool = False

    @property
    def block_side(self) -> int:
        return self.grid.block_side


def _row_values(row: Any, domain, index: int) -> List[int]:
    if isinstance(row, str):
        values = []
        for ch in row.replace(" ", ""):
            if ch in EMPTY_MARKS:
                values.append(0)
            else:
                try:
                    values.append(domain.from_symbol(ch).rank)
                except ValueError as exc:
                    raise PuzzleFormatError(f"row {index}: {exc}") from exc
    elif isinstance(row, (list, tuple)):
        try:
            values = [int(v) for v in row]
        except (TypeError, ValueError) as exc:
            raise PuzzleFormatError(f"row {index}: {exc}") from exc
    else:
        raise PuzzleFormatError(f"row {index}: expected a string or a list, got {type(row).__name__}")
    if len(values) != domain.side():
        raise PuzzleFormatError(f"row {index}: expected {domain.side()} cells, got {len(values)}")
    return values


def _block_side(data: Mapping[str, Any]) -> int:
    try:
        return int(data.get("block_side", 2))
    except (TypeError, ValueError) as exc:
        raise PuzzleFormatError(f"block_side: {exc}") from exc


def _limit(options: Mapping[str, Any]) -> Optional[int]:
    limit = options.get("limit")
    if limit is None:
        return None
    try:
        limit = int(limit)
    except (TypeError, ValueError) as exc:
        raise PuzzleFormatError(f"options.limit: {exc}") from exc
    if limit < 0:
        raise PuzzleFormatError(f"options.limit must not be negative, got {limit}")
    return limit


def parse_puzzle(data: Mapping[str, Any]) -> Puzzle:
    """Build a Puzzle from an already loaded YAML mapping."""
    if not isinstance(data, Mapping):
        raise PuzzleFormatError("a puzzle document must be a mapping")
    try:
        domain = get_domain(_block_side(data))
    except PuzzleFormatError:
        raise
    except ValueError as exc:
        raise PuzzleFormatError(str(exc)) from exc

    rows = data.get("grid") or []
    if rows:
        if not isinstance(rows, list):
            raise PuzzleFormatError("grid must be a list of rows")
        if len(rows) != domain.side():
            raise PuzzleFormatError(f"expected {domain.side()} rows, got {len(rows)}")
        values = []
        for index, row in enumerate(rows):
            values.extend(_row_values(row, domain, index))
        try:
            grid = Grid.from_values(values, domain)
        except ValueError as exc:
            raise PuzzleFormatError(str(exc)) from exc
    else:
        grid = Grid.empty(domain)

    options = data.get("options") or {}
    if not isinstance(options, Mapping):
        raise PuzzleFormatError("options must be a mapping")
    return Puzzle(
        grid=grid,
        limit=_limit(options),
        step=bool(options.get("step", False)),
    )


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PuzzleFormatError(f"{path}: not valid YAML: {exc}") from exc
    return parse_puzzle(data or {})
