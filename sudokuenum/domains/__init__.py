"""Digit alphabets and the domain registry."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Dict, List, Optional, Type

SYMBOLS = "123456789ABCDEFG"


@total_ordering
class Digit(Enum):
    """Base for a closed alphabet; members are ordered by their rank."""

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    @property
    def rank(self) -> int:
        return self.value

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.value - 1]

    def __str__(self) -> str:
        return self.symbol


class Domain:
    """An alphabet together with the block side of the grids it fills."""
    name: str = "domain"
    block_side: int = 0
    digits_enum: Type[Digit] = Digit

    @classmethod
    def side(cls) -> int:
        return cls.block_side * cls.block_side

    @classmethod
    def cell_count(cls) -> int:
        return cls.side() ** 2

    @classmethod
    def digits(cls) -> List[Digit]:
        return list(cls.digits_enum)

    @classmethod
    def after(cls, cell: Optional[Digit]) -> List[Digit]:
        """Digits strictly greater than ``cell``; every digit for an empty cell."""
        if cell is None:
            return cls.digits()
        return [d for d in cls.digits_enum if d > cell]

    @classmethod
    def successor(cls, cell: Optional[Digit]) -> Optional[Digit]:
        following = cls.after(cell)
        return following[0] if following else None

    @classmethod
    def from_rank(cls, rank: int) -> Digit:
        try:
            return cls.digits_enum(rank)
        except ValueError:
            raise ValueError(f"{rank!r} is not a digit of the {cls.name} alphabet") from None

    @classmethod
    def from_symbol(cls, symbol: str) -> Digit:
        for d in cls.digits_enum:
            if d.symbol == symbol.upper():
                return d
        raise ValueError(f"{symbol!r} is not a symbol of the {cls.name} alphabet")


DOMAIN_REGISTRY: Dict[int, Type[Domain]] = {}


def register_domain(cls: Type[Domain]) -> Type[Domain]:
    DOMAIN_REGISTRY[cls.block_side] = cls
    return cls


def get_domain(block_side: int) -> Type[Domain]:
    try:
        return DOMAIN_REGISTRY[block_side]
    except KeyError:
        sizes = ", ".join(str(b) for b in sorted(DOMAIN_REGISTRY))
        raise ValueError(f"unsupported block side {block_side} (known: {sizes})") from None


# Importing the alphabets registers them.
from . import four, nine, sixteen  # noqa: E402,F401
