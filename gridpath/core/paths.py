# gridpath/core/paths.py
#!/usr/bin/env python3
from typing import Dict, List

from gridpath.core.types import Cell


def reconstruct_path(parent: Dict[Cell, Cell], start: Cell, end: Cell) -> List[Cell]:
    """
    Walk parent links back from `end`, then put `start` in front.

    `start` is added unconditionally, so an unreachable `end` gives `[start]`
    rather than an error. Callers check path[-1] == end before trusting it.
    """
    path: List[Cell] = []
    cur = end
    while cur in parent:
        path.append(cur)
        cur = parent[cur]
    path.append(start)
    path.reverse()
    return path


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
