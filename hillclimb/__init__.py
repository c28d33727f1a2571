from hillclimb.core.types import Cell, Grid, StepResult, HeightmapError, UnreachableGoalError
from hillclimb.core.heightmap import parse_heightmap, load_heightmap
from hillclimb.core.astar import AStarAlgo, shortest_path
from hillclimb.core.dijkstra import DijkstraAlgo, uniform_cost_path
from hillclimb.core.low_points import low_points, best_low_start, shortest_from_any_low_point

__all__ = [
    "Cell", "Grid", "StepResult", "HeightmapError", "UnreachableGoalError",
    "parse_heightmap", "load_heightmap",
    "AStarAlgo", "shortest_path",
    "DijkstraAlgo", "uniform_cost_path",
    "low_points", "best_low_start", "shortest_from_any_low_point",
]
