# hillclimb/cli.py
#!/usr/bin/env python3
"""
Hill climb answers from the command line.

    python -m hillclimb [PATH] [--no-shortcut] [--view]

Reads the heightmap from PATH (stdin when omitted) and prints:
    Shortest path length from start: N
    Shortest path length: M

Options:
- ENV: HILLCLIMB_SHORTCUT=0|1 (settled-set skipping of low points, default on)
- CLI: --shortcut / --no-shortcut / --shortcut=0|1, --view (open the pygame viewer instead)

Exit codes: 1 input unreadable, 2 malformed heightmap, 3 no low point reaches E.
"""

import os
import sys
from typing import List, Optional

from hillclimb.core.astar import shortest_path
from hillclimb.core.heightmap import load_heightmap, parse_heightmap
from hillclimb.core.low_points import shortest_from_any_low_point
from hillclimb.core.types import Grid, HeightmapError, UnreachableGoalError

EXIT_READ = 1
EXIT_PARSE = 2
EXIT_NO_LOW_PATH = 3


def _as_bool(value: str) -> bool:
    return value.lower() not in ("0", "false", "no", "off")


def resolve_shortcut(argv: List[str]) -> bool:
    shortcut = _as_bool(os.getenv("HILLCLIMB_SHORTCUT", "1"))
    for arg in argv:
        if arg == "--shortcut":
            shortcut = True
        elif arg == "--no-shortcut":
            shortcut = False
        elif arg.startswith("--shortcut="):
            shortcut = _as_bool(arg.split("=", 1)[1])
    return shortcut


def resolve_input(argv: List[str]) -> Optional[str]:
    for arg in argv:
        if not arg.startswith("--"):
            return arg
    return None


def read_grid(path: Optional[str]) -> Grid:
    if path is None:
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as ex:
            raise HeightmapError(f"not UTF-8 text: byte {ex.start}") from None
        return parse_heightmap(text)
    return load_heightmap(path)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = resolve_input(argv)

    try:
        grid = read_grid(path)
    except HeightmapError as ex:
        print(f"Failed to parse heightmap: {ex}", file=sys.stderr)
        return EXIT_PARSE
    except OSError as ex:
        print(f"Failed to read input: {ex}", file=sys.stderr)
        return EXIT_READ

    if "--view" in argv:
        from hillclimb.app.viewer import Viewer, map_key_for
        Viewer(grid, "custom" if path is None else map_key_for(path)).run()
        return 0

    from_start = shortest_path(grid)
    if from_start is None:
        print("Shortest path length from start: unreachable")
    else:
        print(f"Shortest path length from start: {len(from_start)}")

    try:
        best = shortest_from_any_low_point(grid, resolve_shortcut(argv))
    except UnreachableGoalError as ex:
        print(f"Failed to find a path from any low point: {ex}", file=sys.stderr)
        return EXIT_NO_LOW_PATH
    print(f"Shortest path length: {len(best)}")
    return 0
