# gridpath/core/frontier.py
#!/usr/bin/env python3
"""
Min-heap frontier keyed by priority tuples.

Entries are [priority, seq, cell, live]; seq is a monotonic counter so equal
priorities pop in insertion order and cells are never compared.

- push():   always adds an entry (stale duplicates are the caller's problem)
- update(): insert or re-key, keeping at most one live entry per cell
"""

from typing import Any, Dict, List, Tuple
import heapq

from gridpath.core.types import Cell

Priority = Tuple[Any, ...]


class Frontier:
    def __init__(self) -> None:
        self._heap: List[list] = []
        self._live: Dict[Cell, list] = {}   # cell -> entry made by update()
        self._size = 0
        self.seq = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def push(self, cell: Cell, priority: Priority) -> None:
        heapq.heappush(self._heap, [priority, self._bump(), cell, True])
        self._size += 1

    def update(self, cell: Cell, priority: Priority) -> bool:
        """Insert cell, or re-key its existing entry. Returns True if newly inserted."""
        old = self._live.pop(cell, None)
        if old is not None:
            old[3] = False
            self._size -= 1
        entry = [priority, self._bump(), cell, True]
        self._live[cell] = entry
        heapq.heappush(self._heap, entry)
        self._size += 1
        return old is None

    def pop(self) -> Tuple[Priority, Cell]:
        while self._heap:
            entry = heapq.heappop(self._heap)
            priority, _, cell, live = entry
            if not live:
                continue
            self._size -= 1
            if self._live.get(cell) is entry:
                del self._live[cell]
            return priority, cell
        raise KeyError("pop from an empty frontier")

    def clear(self) -> None:
        self._heap.clear()
        self._live.clear()
        self._size = 0
        self.seq = 0

    def __contains__(self, cell: Cell) -> bool:
        # only entries made by update() are tracked
        return cell in self._live

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
