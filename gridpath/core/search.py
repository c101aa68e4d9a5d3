# gridpath/core/search.py
#!/usr/bin/env python3
"""
search(grid, start, end, algorithm) -> SearchResult

The one entry point the app layer needs. Pure function of its inputs: the
caller's grid is never mutated, and two calls with the same arguments give
the same visited/path sequences.
"""

from typing import Dict, Optional, Type, Union
import logging

from gridpath.core.astar import AStarAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.paths import manhattan
from gridpath.core.types import Cell, Grid, SearchResult

logger = logging.getLogger(__name__)

Algo = Union[DijkstraAlgo, AStarAlgo]

ALGORITHMS: Dict[str, Type] = {
    "dijkstra": DijkstraAlgo,
    "uniform-cost": DijkstraAlgo,
    "astar": AStarAlgo,
    "a*": AStarAlgo,
    "heuristic": AStarAlgo,
}

__all__ = ["ALGORITHMS", "make_algo", "manhattan", "search"]


def make_algo(algorithm: str) -> Algo:
    cls = ALGORITHMS.get(algorithm.strip().lower())
    if cls is None:
        raise ValueError(f"unknown algorithm {algorithm!r}; expected one of {sorted(ALGORITHMS)}")
    return cls()


def search(grid: Grid, start: Optional[Cell] = None, end: Optional[Cell] = None,
           algorithm: str = "dijkstra") -> SearchResult:
    algo = make_algo(algorithm)

    run_grid = grid
    if start is not None or end is not None:
        run_grid = grid.copy()
        if start is not None:
            run_grid.start = tuple(start)
        if end is not None:
            run_grid.goal = tuple(end)
    run_grid.validate()

    algo.init(run_grid)
    result = algo.run()
    logger.debug("search %s %s->%s: found=%s visited=%d",
                 result.algo, run_grid.start, run_grid.goal, result.found, len(result.visited))
    return result
