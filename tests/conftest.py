"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random
from collections import deque
from pathlib import Path

import pytest

from util import Cell, GridConfig

ALGORITHM_NAMES = ["dijkstra", "bfs", "dfs", "bellman"]


def reference_distances(config):
    """Plain BFS distances from start, used as ground truth in tests."""
    dist = {config.start: 0}
    q = deque([config.start])
    while q:
        cell = q.popleft()
        for n in config.neighbors(cell):
            if n not in dist:
                dist[n] = dist[cell] + 1
                q.append(n)
    return dist


def random_grid(seed, rows=9, cols=11, density=0.3):
    """Reproducible grid with roughly `density` of its cells walled."""
    rng = random.Random(seed)
    start = Cell(rng.randrange(rows), rng.randrange(cols))
    end = Cell(rng.randrange(rows), rng.randrange(cols))
    walls = {
        Cell(r, c)
        for r in range(rows)
        for c in range(cols)
        if rng.random() < density
    } - {start, end}
    return GridConfig(rows=rows, cols=cols, start=start, end=end, walls=frozenset(walls))


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def open_grid() -> GridConfig:
    """5x5 grid with no walls, corner to corner."""
    return GridConfig(rows=5, cols=5, start=Cell(0, 0), end=Cell(4, 4))


@pytest.fixture
def enclosed_grid() -> GridConfig:
    """7x7 grid whose end cell is walled in on all four sides."""
    walls = {Cell(3, 4), Cell(5, 4), Cell(4, 3), Cell(4, 5)}
    return GridConfig(rows=7, cols=7, start=Cell(0, 0), end=Cell(4, 4), walls=frozenset(walls))


@pytest.fixture
def isolated_start_grid() -> GridConfig:
    """Start cell boxed in by walls, end elsewhere."""
    walls = {Cell(0, 1), Cell(1, 0)}
    return GridConfig(rows=4, cols=4, start=Cell(0, 0), end=Cell(3, 3), walls=frozenset(walls))


@pytest.fixture
def detour_grid() -> GridConfig:
    """A wall splits the board so the shortest route must go around it.

    . . . . .
    . # # # .
    S # . # E
    . # . # .
    . . . . .
    """
    walls = {Cell(1, 1), Cell(1, 2), Cell(1, 3), Cell(2, 1), Cell(2, 3), Cell(3, 1), Cell(3, 3)}
    return GridConfig(rows=5, cols=5, start=Cell(2, 0), end=Cell(2, 4), walls=frozenset(walls))


@pytest.fixture
def write_grid_file(tmp_path):
    """Write text to a grid file in a temp dir and return its path."""
    def _write(text, name="grid.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
