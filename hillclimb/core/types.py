# hillclimb/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field, replace
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (col, row)

MIN_ELEVATION = 0
MAX_ELEVATION = 25
MAX_CLIMB = 1


class HeightmapError(ValueError):
    """Raised when heightmap text is not a well-formed grid."""


class UnreachableGoalError(RuntimeError):
    """Raised when no low point can reach the goal."""


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[Tuple[int, ...], ...]   # [row][col] elevations
    start: Cell
    goal: Cell

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def elevation(self, c: Cell) -> int:
        if not self.in_bounds(c):
            raise ValueError(f"Asked elevation of out-of-bounds cell {c}")
        x, y = c
        return self.cells[y][x]

    def neighbors(self, c: Cell) -> List[Cell]:
        """Cells reachable in one step: up, down, left, right.

        Climbing is limited to MAX_CLIMB, dropping is not limited, so the
        relation is directed.
        """
        x, y = c
        limit = self.elevation(c) + MAX_CLIMB
        out: List[Cell] = []
        for n in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            if self.in_bounds(n) and self.cells[n[1]][n[0]] <= limit:
                out.append(n)
        return out

    def with_start(self, start: Cell) -> "Grid":
        if not self.in_bounds(start):
            raise ValueError(f"start {start} out of bounds")
        return replace(self, start=start)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
