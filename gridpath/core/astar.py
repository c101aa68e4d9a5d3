# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* on a 4-connected unit-cost grid, one expansion per step().

Same lifecycle as DijkstraAlgo: init(grid) - reset() - step() - run().

Heuristic:
- Manhattan distance to the goal. Admissible and consistent on a 4-connected
  unit grid, so the first pop of the goal carries the optimal g.

Open set:
- A cell has at most one live frontier entry. Improving a cell that is
  already open re-keys that entry instead of pushing a second one.

Tie-breaking in the PQ:
- (f, h) then FIFO by insertion: lower f, then closer to the goal.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
from math import inf

from gridpath.core.frontier import Frontier
from gridpath.core.paths import manhattan, reconstruct_path
from gridpath.core.types import Cell, Grid, GridError, SearchResult, StepResult

logger = logging.getLogger(__name__)


@dataclass
class AStarAlgo:
    name: str = "A*"

    # Internal state
    grid: Optional[Grid] = None
    frontier: Frontier = field(default_factory=Frontier)   # (f, h) keys
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    f: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    visited: List[Cell] = field(default_factory=list)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    goal_cell: Optional[Cell] = None

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        """Initialize on a given grid."""
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.closed_set.clear()
        self.g.clear()
        self.f.clear()
        self.parent.clear()
        self.visited = []
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.goal_cell = self.grid.goal

        s = self.grid.start
        self.g[s] = 0
        self.f[s] = self._h(s)
        self.frontier.update(s, (self.f[s], self._h(s)))

    # -------------------- helpers --------------------

    def _h(self, c: Cell) -> int:
        return manhattan(c, self.goal_cell)

    def _reconstruct_path(self) -> List[Cell]:
        return reconstruct_path(self.parent, self.grid.start, self.goal_cell)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node.
          - If goal, reconstruct and finish.
          - Else relax neighbors with unit edge cost.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path()
            return StepResult(
                status="done",
                path=path,
                metrics=self._metrics(path_len=len(path)),
            )

        if self.no_path:
            return StepResult(status="no_path", path=self._reconstruct_path(),
                              metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            logger.debug("%s: open set exhausted after %d pops", self.name, self.popped_count)
            return StepResult(status="no_path", path=self._reconstruct_path(),
                              metrics=self._metrics())

        _, u = self.frontier.pop()

        # Finalize u
        self.popped_count += 1
        self.closed_set.add(u)
        self.visited.append(u)

        if u == self.goal_cell:
            self.done = True
            path = self._reconstruct_path()
            return StepResult(
                status="done",
                closed=[u],
                current=u,
                path=path,
                metrics=self._metrics(path_len=len(path)),
            )

        # Relax neighbors
        opened_now: List[Cell] = []
        for v in self.grid.neighbors(u):
            if v in self.closed_set:
                continue
            alt = self.g[u] + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.f[v] = alt + self._h(v)
                self.parent[v] = u
                if self.frontier.update(v, (self.f[v], self._h(v))):
                    opened_now.append(v)

        return StepResult(
            status="running",
            opened=opened_now,
            closed=[u],
            current=u,
            metrics=self._metrics(),
        )

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

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stale": 0,
            "open_size": len(self.frontier),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.goal_cell) if self.done else None,
        }
