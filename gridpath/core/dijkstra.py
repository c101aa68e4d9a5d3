# gridpath/core/dijkstra.py
#!/usr/bin/env python3
"""
Uniform-cost search (Dijkstra) on a 4-connected unit-cost grid.

One frontier pop per step(); run() steps until done or no_path and returns
the complete trace. Improved neighbours are pushed again without removing
their older entries, so a stale pop of an already finalized cell is
discarded instead of being visited twice.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
from math import inf

from gridpath.core.frontier import Frontier
from gridpath.core.paths import reconstruct_path
from gridpath.core.types import Cell, Grid, GridError, SearchResult, StepResult

logger = logging.getLogger(__name__)


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    grid: Optional[Grid] = None
    frontier: Frontier = field(default_factory=Frontier)   # (g, not-goal) keys
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    visited: List[Cell] = field(default_factory=list)
    popped_count: int = 0
    stale_count: int = 0
    done: bool = False
    no_path: bool = False
    goal_cell: Optional[Cell] = None

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        self.frontier.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.visited = []
        self.popped_count = 0
        self.stale_count = 0
        self.done = False
        self.no_path = False
        self.goal_cell = self.grid.goal

        s = self.grid.start
        self.g[s] = 0
        self.frontier.push(s, self._key(s))
        self.open_set.add(s)

    def _key(self, c: Cell) -> tuple:
        # equal cost: the goal wins, then insertion order
        return (self.g[c], c != self.goal_cell)

    def _reconstruct_path(self) -> List[Cell]:
        return reconstruct_path(self.parent, self.grid.start, self.goal_cell)

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path()
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", path=self._reconstruct_path(),
                              metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            logger.debug("%s: frontier exhausted after %d pops", self.name, self.popped_count)
            return StepResult(status="no_path", path=self._reconstruct_path(),
                              metrics=self._metrics())

        _, u = self.frontier.pop()
        if u in self.closed_set:
            self.stale_count += 1
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)
        self.visited.append(u)

        if u == self.goal_cell:
            self.done = True
            path = self._reconstruct_path()
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        for v in self.grid.neighbors(u):
            alt = self.g[u] + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                self.frontier.push(v, self._key(v))
                if v not in self.closed_set and v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> SearchResult:
        """Step to completion and hand back the whole trace."""
        if self.grid is None:
            raise GridError("init(grid) must be called before run()")
        res = self.step()
        while res.status == "running":
            res = self.step()
        path = res.path or [self.grid.start]
        logger.debug("%s: %s, visited=%d path_len=%d",
                     self.name, res.status, len(self.visited), len(path))
        return SearchResult(algo=self.name, visited=list(self.visited), path=path,
                            found=self.done, metrics=res.metrics)

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stale": self.stale_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.goal_cell) if self.done else None,
        }
