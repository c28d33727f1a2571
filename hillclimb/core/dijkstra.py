# hillclimb/core/dijkstra.py
#!/usr/bin/env python3
"""Uniform-cost search: A* with a zero heuristic, so the frontier is ordered by g."""

from dataclasses import dataclass
from typing import List, Optional

from hillclimb.core.astar import AStarAlgo
from hillclimb.core.types import Cell, Grid


@dataclass
class DijkstraAlgo(AStarAlgo):
    name: str = "Dijkstra"

    def _h(self, c: Cell) -> int:
        return 0


def uniform_cost_path(grid: Grid, start: Optional[Cell] = None) -> Optional[List[Cell]]:
    algo = DijkstraAlgo()
    algo.init(grid, start)
    return algo.run()
