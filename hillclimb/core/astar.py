# hillclimb/core/astar.py
#!/usr/bin/env python3
"""
A* over a heightmap — one expansion per step() for animation.

Implements the Algorithm API expected by the viewer:
- init(grid, start=None) - reset() - step() -> StepResult

Heuristic:
- Manhattan distance to the goal. Every step costs 1 and moves one cell
  orthogonally, so it never overestimates.

Tie-breaking in the PQ:
- (f, h, -g, seq, cell): lower f, then lower h, then deeper g, then FIFO by seq.

Paths exclude the start cell and end at the goal: len(path) is the step count.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq
from math import inf

from hillclimb.core.types import Cell, Grid, StepResult


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class AStarAlgo:
    name: str = "A*"

    # Internal state
    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    open_pq: List[Tuple[int, int, int, int, Cell]] = field(default_factory=list)  # (f, h, -g, seq, cell)
    open_set: set = field(default_factory=set)         # for overlay
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    goal_cell: Optional[Cell] = None
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None) -> None:
        """Initialize on a given grid, searching from `start` (default grid.start)."""
        self.grid = grid
        self.start = grid.start if start is None else start
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        if self.grid is None:
            return
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.goal_cell = self.grid.goal
        self.seq = 0

        s = self.start
        self.g[s] = 0
        h0 = self._h(s)
        heapq.heappush(self.open_pq, (h0, h0, 0, self._bump(), s))
        self.open_set.add(s)

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _h(self, c: Cell) -> int:
        return manhattan(c, self.grid.goal)

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        path: List[Cell] = []
        cur = end
        while cur != self.start:
            path.append(cur)
            cur = self.parent[cur]
        path.reverse()
        return path

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node, skipping stale entries.
          - If goal, reconstruct and finish.
          - Else relax uphill-limited neighbors with unit edge cost.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.goal_cell)
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        _, _, neg_g_u, _, u = heapq.heappop(self.open_pq)
        g_u = -neg_g_u

        # Ignore stale pops
        if g_u != self.g.get(u, inf):
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.goal_cell:
            self.done = True
            path = self._reconstruct_path(u)
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        for v in self.grid.neighbors(u):
            alt = g_u + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                h_v = self._h(v)
                heapq.heappush(self.open_pq, (alt + h_v, h_v, -alt, self._bump(), v))
                if v not in self.closed_set and v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> Optional[List[Cell]]:
        """Step until done; the path, or None when the goal is unreachable."""
        while True:
            res = self.step()
            if res.status == "done":
                return res.path
            if res.status in ("no_path", "idle"):
                return None

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
        }


def shortest_path(grid: Grid, start: Optional[Cell] = None) -> Optional[List[Cell]]:
    """Fewest-steps path from `start` (default grid.start) to grid.goal, or None."""
    algo = AStarAlgo()
    algo.init(grid, start)
    return algo.run()
