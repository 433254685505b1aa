from pathlib import Path

import pytest

from sudokuenum.core.grid import Grid
from sudokuenum.domains.four import Four

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def empty4() -> Grid:
    return Grid.empty(Four)


@pytest.fixture
def puzzle_dir() -> Path:
    return ROOT
