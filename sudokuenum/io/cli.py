"""Command-line interface: print the starting grid, then its solutions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..core.csp import GridSolver
from ..core.grid import Grid
from ..domains import DOMAIN_REGISTRY, get_domain
from . import parser
from .render import render


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate every completion of a Sudoku grid")
    ap.add_argument("puzzle", nargs="?", help="Path to puzzle YAML (default: an empty grid)")
    ap.add_argument(
        "--block-side", type=int, default=2, choices=sorted(DOMAIN_REGISTRY),
        help="Block side of the empty grid used when no puzzle is given",
    )
    ap.add_argument("--limit", type=non_negative_int, help="Stop after this many solutions")
    ap.add_argument("--step", action="store_true", help="Wait for one byte on stdin before each solution")
    ap.add_argument("--count", action="store_true", help="Only print the number of solutions")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.puzzle:
        try:
            puz = parser.load_puzzle(Path(args.puzzle))
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        puz = parser.Puzzle(grid=Grid.empty(get_domain(args.block_side)))

    limit = args.limit if args.limit is not None else puz.limit
    step = args.step or puz.step

    print(render(puz.grid), end="")

    solver = GridSolver(puz.grid)
    found = 0
    while limit is None or found < limit:
        if step and not args.count and not sys.stdin.read(1):
            break
        solution = next(solver, None)
        if solution is None:
            break
        found += 1
        if not args.count:
            print(f"Solution #{found}")
            print(render(solution), end="")

    if args.count:
        print(found)
    if found == 0 and solver.exhausted:
        print("No solution.")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
