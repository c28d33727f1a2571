"""Shared fixtures and reference helpers for the test suite."""

import os
import sys
from collections import deque
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hillclimb.core.heightmap import parse_heightmap

MAPS_DIR = Path(__file__).resolve().parents[1] / "maps"

EXAMPLE = """Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi"""


@pytest.fixture
def example_grid():
    return parse_heightmap(EXAMPLE)


def bfs_steps(grid, start):
    """Exhaustive breadth-first step count from start to goal, or None."""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        c = queue.popleft()
        if c == grid.goal:
            return dist[c]
        for n in grid.neighbors(c):
            if n not in dist:
                dist[n] = dist[c] + 1
                queue.append(n)
    return None


def assert_valid_path(grid, start, path):
    prev = start
    for c in path:
        assert c in grid.neighbors(prev)
        prev = c
    assert prev == grid.goal
