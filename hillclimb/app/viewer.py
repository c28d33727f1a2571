# hillclimb/app/viewer.py
#!/usr/bin/env python3
"""
Hill Climb Viewer: animates the searches over a shaded heightmap.

Keys are listed in the sidebar (see KEY_HELP).

Usage:
- python -m hillclimb.app.viewer [PATH]
- python -m hillclimb PATH --view
"""

import sys, time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from hillclimb.core.astar import AStarAlgo
from hillclimb.core.dijkstra import DijkstraAlgo
from hillclimb.core.heightmap import load_heightmap
from hillclimb.core.low_points import best_low_start
from hillclimb.core.types import Cell, Grid, MAX_ELEVATION, UnreachableGoalError

MAP_DIR = Path(__file__).resolve().parents[2] / "maps"
MAP_FILES = {
    "01_example": MAP_DIR / "01_example.txt",
    "02_plateau": MAP_DIR / "02_plateau.txt",
    "03_walled":  MAP_DIR / "03_walled.txt",
}
ALGORITHMS = {
    "A*": AStarAlgo,
    "Dijkstra": DijkstraAlgo,
}

MAX_MAP_PX = (960, 640)   # terrain area is scaled to fit inside this
CELL_PX_RANGE = (6, 40)
SIDEBAR_W = 300
FPS = 60

VALLEY     = ( 34, 85, 51)
SUMMIT     = (236,232,220)
SIDEBAR_BG = ( 22, 25, 31)
GRID_LINE  = (  0,  0,  0, 40)
CLOSED_A   = (255,  0,120, 90)
OPEN_A     = (  0,150,255,110)
PATH_COLOR = (  0,255,200)
START_COLOR= ( 70,130,180)
GOAL_COLOR = (220, 50, 47)
TEXT       = (230,235,240)
TEXT_DIM   = (150,156,166)
TITLE      = (255,210,  0)

KEY_HELP = [
    "SPACE run/pause   N step   R reset",
    "A / D   A* / Dijkstra",
    "L best low start   S marked start",
    "1 2 3   bundled maps",
    "+ / -   speed      Q quit",
]


def elevation_color(v: int) -> Tuple[int, int, int]:
    """Linear blend from VALLEY (elevation 0) to SUMMIT (MAX_ELEVATION)."""
    t = min(max(v, 0), MAX_ELEVATION) / MAX_ELEVATION
    return tuple(int(lo + (hi - lo) * t) for lo, hi in zip(VALLEY, SUMMIT))


def cell_px_for(grid: Grid) -> int:
    fit = min(MAX_MAP_PX[0] // grid.width, MAX_MAP_PX[1] // grid.height)
    lo, hi = CELL_PX_RANGE
    return max(lo, min(hi, fit))


class Viewer:
    def __init__(self, grid: Grid, map_key: str = "custom"):
        pygame.init()
        self.font = pygame.font.Font(None, 20)
        self.font_title = pygame.font.Font(None, 26)
        self.clock = pygame.time.Clock()

        self.algo_label = "A*"
        self.steps_per_sec = 8
        self.running = False
        self._last_tick = 0.0
        self._keys: Dict[int, Callable[[], None]] = {
            pygame.K_SPACE: self.toggle_run,
            pygame.K_n: self.step,
            pygame.K_r: self.restart,
            pygame.K_a: lambda: self.use_algorithm("A*"),
            pygame.K_d: lambda: self.use_algorithm("Dijkstra"),
            pygame.K_l: self.start_from_best_low_point,
            pygame.K_s: lambda: self.start_from(self.grid.start),
            pygame.K_1: lambda: self.open_map("01_example"),
            pygame.K_2: lambda: self.open_map("02_plateau"),
            pygame.K_3: lambda: self.open_map("03_walled"),
            pygame.K_PLUS: lambda: self.change_speed(+1),
            pygame.K_EQUALS: lambda: self.change_speed(+1),
            pygame.K_MINUS: lambda: self.change_speed(-1),
        }
        self.show(grid, map_key)

    # ---------- state ----------
    def show(self, grid: Grid, map_key: str):
        self.grid = grid
        self.map_key = map_key
        self.cell_px = cell_px_for(grid)
        size = (grid.width * self.cell_px + SIDEBAR_W,
                max(grid.height * self.cell_px, 320))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(f"Hill Climb: {map_key}")
        self.terrain = self._render_terrain()
        self.start_from(grid.start)

    def start_from(self, start: Cell):
        self.start = start
        self.restart()

    def restart(self):
        self.algo = ALGORITHMS[self.algo_label](name=self.algo_label)
        self.algo.init(self.grid, self.start)
        self.running = False
        self.status = "idle"
        self.frontier: set = set()
        self.expanded: set = set()
        self.path: List[Cell] = []
        self.metrics: dict = {}

    def step(self):
        if self.status in ("done", "no_path"):
            return
        res = self.algo.step()
        self.frontier.update(res.opened)
        self.expanded.update(res.closed)
        self.frontier.difference_update(res.closed)
        self.metrics = res.metrics
        self.status = res.status
        if res.path is not None:
            self.path = res.path
        if self.status in ("done", "no_path"):
            self.running = False

    def run_to_end(self, limit: int = 1_000_000) -> str:
        for _ in range(limit):
            self.step()
            if self.status in ("done", "no_path"):
                break
        return self.status

    def toggle_run(self):
        if self.status not in ("done", "no_path"):
            self.running = not self.running

    def change_speed(self, dv: int):
        self.steps_per_sec = max(1, min(120, self.steps_per_sec + dv))

    def use_algorithm(self, label: str):
        self.algo_label = label
        self.restart()

    def open_map(self, key: str):
        try:
            grid = load_heightmap(MAP_FILES[key])
        except (OSError, ValueError) as ex:
            print(f"Failed to load map {key}: {ex}", file=sys.stderr)
            return
        self.show(grid, key)

    def start_from_best_low_point(self):
        try:
            start, _ = best_low_start(self.grid)
        except UnreachableGoalError as ex:
            print(f"Failed to find a low starting point: {ex}", file=sys.stderr)
            self.running = False
            self.status = "no_path"
            return
        self.start_from(start)

    # ---------- loop ----------
    def run(self):
        while True:
            for e in pygame.event.get():
                if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key in (pygame.K_q, pygame.K_ESCAPE)):
                    pygame.quit()
                    return
                if e.type == pygame.KEYDOWN and e.key in self._keys:
                    self._keys[e.key]()
            now = time.time()
            if self.running and now - self._last_tick >= 1.0 / self.steps_per_sec:
                self._last_tick = now
                self.step()
            self.draw()
            self.clock.tick(FPS)

    # ---------- drawing ----------
    def _render_terrain(self) -> pygame.Surface:
        """Elevation shading is static per map, so it is drawn once."""
        cs = self.cell_px
        surf = pygame.Surface((self.grid.width * cs, self.grid.height * cs))
        for y, row in enumerate(self.grid.cells):
            for x, v in enumerate(row):
                surf.fill(elevation_color(v), (x * cs, y * cs, cs, cs))
        lines = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for x in range(self.grid.width + 1):
            pygame.draw.line(lines, GRID_LINE, (x * cs, 0), (x * cs, surf.get_height()))
        for y in range(self.grid.height + 1):
            pygame.draw.line(lines, GRID_LINE, (0, y * cs), (surf.get_width(), y * cs))
        surf.blit(lines, (0, 0))
        return surf

    def _center(self, c: Cell) -> Tuple[int, int]:
        cs = self.cell_px
        return c[0] * cs + cs // 2, c[1] * cs + cs // 2

    def draw(self):
        cs = self.cell_px
        self.screen.blit(self.terrain, (0, 0))

        shade = pygame.Surface(self.terrain.get_size(), pygame.SRCALPHA)
        for cells, color in ((self.expanded, CLOSED_A), (self.frontier, OPEN_A)):
            for x, y in cells:
                shade.fill(color, (x * cs, y * cs, cs, cs))
        self.screen.blit(shade, (0, 0))

        if self.path:
            pts = [self._center(c) for c in [self.start] + self.path]
            pygame.draw.lines(self.screen, PATH_COLOR, False, pts, max(2, cs // 5))

        radius = max(3, cs // 2 - 2)
        pygame.draw.circle(self.screen, START_COLOR, self._center(self.start), radius)
        pygame.draw.circle(self.screen, GOAL_COLOR, self._center(self.grid.goal), radius)

        self._draw_sidebar()
        pygame.display.flip()

    def _draw_sidebar(self):
        x0 = self.terrain.get_width()
        w, h = self.screen.get_size()
        self.screen.fill(SIDEBAR_BG, (x0, 0, w - x0, h))

        y = 14
        def text(s, font=None, color=TEXT):
            nonlocal y
            surf = (font or self.font).render(s, True, color)
            self.screen.blit(surf, (x0 + 14, y))
            y += surf.get_height() + 5

        text(f"{self.map_key}  {self.grid.width}x{self.grid.height}", self.font_title, TITLE)
        text(f"{self.algo_label} from {self.start}: {self.status}")
        text(f"expanded {self.metrics.get('popped', 0)}   frontier {self.metrics.get('open_size', 0)}")
        text(f"steps {len(self.path)}" if self.status == "done" else "steps -")
        text(f"speed {self.steps_per_sec}/s{'  (running)' if self.running else ''}")
        y += 10
        for line in KEY_HELP:
            text(line, color=TEXT_DIM)


def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]).resolve() if argv else MAP_FILES["01_example"]
    try:
        grid = load_heightmap(path)
    except (OSError, ValueError) as ex:
        print(f"Failed to load map {path}: {ex}", file=sys.stderr)
        sys.exit(1)
    Viewer(grid, map_key_for(path)).run()


def map_key_for(path: Path) -> str:
    path = Path(path).resolve()
    return next((k for k, p in MAP_FILES.items() if p.resolve() == path), "custom")


if __name__ == "__main__":
    main()
