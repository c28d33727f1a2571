# hillclimb/core/low_points.py
#!/usr/bin/env python3
"""
Multi-source search: the fewest steps to the goal from any lowest cell.

Every low point is searched with A*, in row-major order. With `shortcut`
enabled, a found path is also walked from its start: while it keeps crossing
low cells, each of those cells is settled and scored with the remaining
suffix. A suffix of a shortest path is itself a shortest path, so settled
cells never need their own search.
"""

from typing import List, Optional, Set, Tuple

from hillclimb.core.astar import shortest_path
from hillclimb.core.types import Cell, Grid, MIN_ELEVATION, UnreachableGoalError


def low_points(grid: Grid) -> List[Cell]:
    return [(x, y)
            for y, row in enumerate(grid.cells)
            for x, v in enumerate(row)
            if v == MIN_ELEVATION]


def best_low_start(grid: Grid, shortcut: bool = True) -> Tuple[Cell, List[Cell]]:
    """Low point with the shortest path to the goal, and that path.

    Raises UnreachableGoalError when no low point reaches the goal.
    """
    settled: Set[Cell] = set()
    best_start: Optional[Cell] = None
    best_path: Optional[List[Cell]] = None

    for s in low_points(grid):
        if s in settled:
            continue
        settled.add(s)

        path = shortest_path(grid, s)
        if path is None:
            continue

        start = s
        if shortcut:
            while path and grid.elevation(path[0]) == MIN_ELEVATION:
                start = path[0]
                path = path[1:]
                settled.add(start)

        if best_path is None or len(path) < len(best_path):
            best_start, best_path = start, path

    if best_path is None:
        raise UnreachableGoalError(f"no low point reaches the goal {grid.goal}")
    return best_start, best_path


def shortest_from_any_low_point(grid: Grid, shortcut: bool = True) -> List[Cell]:
    return best_low_start(grid, shortcut)[1]
