# hillclimb/core/heightmap.py
#!/usr/bin/env python3
"""
Heightmap loader.

Text format, one row per line:
- 'a'..'z'  -> elevation 0..25
- 'S'       -> start, elevation 0 (exactly one)
- 'E'       -> goal, elevation 25 (exactly one)
"""

from pathlib import Path
from typing import List, Optional, Union

from hillclimb.core.types import Cell, Grid, HeightmapError, MAX_ELEVATION, MIN_ELEVATION

START_MARK = "S"
GOAL_MARK = "E"


def elevation_of(ch: str) -> int:
    if ch == START_MARK:
        return MIN_ELEVATION
    if ch == GOAL_MARK:
        return MAX_ELEVATION
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    raise HeightmapError(f"unknown terrain mark {ch!r}")


def parse_heightmap(text: str) -> Grid:
    rows = [line.strip() for line in text.strip().splitlines()]
    if not rows or not rows[0]:
        raise HeightmapError("empty heightmap")

    width = len(rows[0])
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    cells: List[tuple] = []

    for y, line in enumerate(rows):
        if len(line) != width:
            raise HeightmapError(f"row {y} has {len(line)} cells, expected {width}")
        row: List[int] = []
        for x, ch in enumerate(line):
            try:
                row.append(elevation_of(ch))
            except HeightmapError as ex:
                raise HeightmapError(f"{ex} at row {y}, col {x}") from None
            if ch == START_MARK:
                if start is not None:
                    raise HeightmapError(f"second start mark at row {y}, col {x}")
                start = (x, y)
            elif ch == GOAL_MARK:
                if goal is not None:
                    raise HeightmapError(f"second goal mark at row {y}, col {x}")
                goal = (x, y)
        cells.append(tuple(row))

    if start is None:
        raise HeightmapError("missing start mark 'S'")
    if goal is None:
        raise HeightmapError("missing goal mark 'E'")
    return Grid(width, len(cells), tuple(cells), start, goal)


def decode_heightmap(data: bytes) -> Grid:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as ex:
        raise HeightmapError(f"not UTF-8 text: byte {ex.start}") from None
    return parse_heightmap(text)


def load_heightmap(path: Union[str, Path]) -> Grid:
    with open(path, "rb") as f:
        return decode_heightmap(f.read())
