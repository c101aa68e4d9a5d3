# gridpath/core/maps.py
#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Union

from gridpath.core.types import Grid, GridError, OPEN, WALL

MAP_DIR = Path(__file__).resolve().parents[2] / "maps"


def load_map(path: Union[str, Path]) -> Grid:
    """Read a preset grid from JSON: {rows, cols, start: [r, c], goal: [r, c], cells}."""
    with open(path, "r") as f:
        data = json.load(f)
    try:
        rows  = int(data["rows"])
        cols  = int(data["cols"])
        start = tuple(data["start"])
        goal  = tuple(data["goal"])
        cells = [[WALL if v else OPEN for v in row] for row in data["cells"]]
    except (KeyError, TypeError, ValueError) as ex:
        raise GridError(f"{path}: malformed map ({ex})") from ex
    grid = Grid(rows, cols, cells, start, goal)
    grid.validate()
    return grid
