from __future__ import annotations

from enum import Enum
from typing import Optional

from ..domains import Digit


class CellState(str, Enum):
    """How a cell came to hold (or not hold) its value during a search."""
    GIVEN = "given"
    GUESS = "guess"
    EMPTY = "empty"


class InvariantError(AssertionError):
    """The search state machine was driven outside its contract."""


class InconsistentGridError(ValueError):
    """A grid was built with a digit repeated in a row, column or block."""


Position = int
Cell = Optional[Digit]
