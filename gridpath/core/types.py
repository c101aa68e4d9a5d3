# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Set

Cell = Tuple[int, int]  # (row, col)

OPEN = 0
WALL = 1

# up, down, left, right
OFFSETS4: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GridError(ValueError):
    """Grid, start or goal violates a precondition of the search."""


def _is_cell(c) -> bool:
    return (isinstance(c, tuple) and len(c) == 2
            and all(isinstance(v, int) and not isinstance(v, bool) for v in c))


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[int]]             # [row][col]
    start: Cell
    goal: Cell

    def __post_init__(self):
        # JSON and callers hand in lists; cells must be hashable tuples
        if isinstance(self.start, list):
            self.start = tuple(self.start)
        if isinstance(self.goal, list):
            self.goal = tuple(self.goal)

    @classmethod
    def empty(cls, rows: int = 20, cols: int = 20,
              start: Optional[Cell] = None, goal: Optional[Cell] = None) -> "Grid":
        cells = [[OPEN] * cols for _ in range(rows)]
        if start is None:
            start = (0, 0)
        if goal is None:
            goal = (rows - 1, cols - 1)
        return cls(rows, cols, cells, tuple(start), tuple(goal))

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def is_block(self, c: Cell) -> bool:
        r, col = c
        return self.cells[r][col] == WALL

    def neighbors(self, c: Cell) -> List[Cell]:
        r, col = c
        out: List[Cell] = []
        for dr, dc in OFFSETS4:
            n = (r + dr, col + dc)
            if self.in_bounds(n) and not self.is_block(n):
                out.append(n)
        return out

    # -------------------- editing (UI side) --------------------

    def set_wall(self, c: Cell, blocked: bool = True) -> bool:
        """Mark c as wall/open. Start and goal are never walled; returns False for them."""
        if not self.in_bounds(c):
            raise GridError(f"cell {c} is outside a {self.rows}x{self.cols} grid")
        if c == self.start or c == self.goal:
            return False
        r, col = c
        self.cells[r][col] = WALL if blocked else OPEN
        return True

    def toggle_wall(self, c: Cell) -> bool:
        if not self.in_bounds(c):
            raise GridError(f"cell {c} is outside a {self.rows}x{self.cols} grid")
        return self.set_wall(c, not self.is_block(c))

    def clear_walls(self) -> None:
        for row in self.cells:
            for col in range(len(row)):
                row[col] = OPEN

    def walls(self) -> Set[Cell]:
        return {(r, c)
                for r, row in enumerate(self.cells)
                for c, v in enumerate(row) if v == WALL}

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(row) for row in self.cells],
                    self.start, self.goal)

    def validate(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise GridError(f"grid dimensions must be positive, got {self.rows}x{self.cols}")
        if len(self.cells) != self.rows or any(len(row) != self.cols for row in self.cells):
            raise GridError("cells size mismatch")
        for label, c in (("start", self.start), ("goal", self.goal)):
            if not _is_cell(c):
                raise GridError(f"{label} must be a (row, col) pair of ints, got {c!r}")
            if not self.in_bounds(c):
                raise GridError(f"{label} {c} out of bounds")
            if self.is_block(c):
                raise GridError(f"{label} {c} is a wall")
        if self.start == self.goal:
            raise GridError(f"start and goal coincide at {self.start}")


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    closed: List[Cell] = field(default_factory=list)
    opened: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    algo: str
    visited: List[Cell]           # finalization order, no duplicates
    path: List[Cell]              # start..goal, or [start] when unreachable
    found: bool
    metrics: Dict[str, Any] = field(default_factory=dict)
