# gridpath/app/playback.py
#!/usr/bin/env python3
"""
Timed playback of a finished search. No rendering in here.

The search hands over complete visited/path lists; Playback releases them
as Frames on a clock so any front end can paint them:

- visited cells first, `visit_delay` seconds apart
- then path cells, `path_delay` seconds apart
- start and goal are skipped (they keep their own markers) and cost no time

Drive it with advance(now) from a frame loop, or play() to block.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional
import logging
import time

from gridpath.core.types import Cell, SearchResult

logger = logging.getLogger(__name__)

VISIT_DELAY = 0.02
PATH_DELAY = 0.05


@dataclass(frozen=True)
class Frame:
    kind: str    # "visited" | "path"
    cell: Cell


class Playback:
    def __init__(self, result: SearchResult, start: Cell, goal: Cell, *,
                 visit_delay: float = VISIT_DELAY, path_delay: float = PATH_DELAY,
                 speed: float = 1.0):
        if visit_delay < 0 or path_delay < 0:
            raise ValueError("delays must be >= 0")
        self.result = result
        self._frames: List[Frame] = []
        self._delays: List[float] = []
        for kind, cells, delay in (("visited", result.visited, visit_delay),
                                   ("path", result.path, path_delay)):
            for c in cells:
                if c == start or c == goal:
                    continue
                self._frames.append(Frame(kind, c))
                self._delays.append(delay)
        self._cursor = 0
        self._next_due: Optional[float] = None
        self.speed = speed

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"speed must be positive, got {value}")
        self._speed = float(value)

    @property
    def done(self) -> bool:
        return self._cursor >= len(self._frames)

    @property
    def progress(self) -> float:
        if not self._frames:
            return 1.0
        return self._cursor / len(self._frames)

    def frames(self) -> List[Frame]:
        """Every frame in order, ignoring the clock."""
        return list(self._frames)

    def advance(self, now: float) -> List[Frame]:
        """Frames due at `now` (monotonic seconds). The first call starts the clock."""
        if self._next_due is None:
            self._next_due = now
        out: List[Frame] = []
        while not self.done and self._next_due <= now:
            out.append(self._frames[self._cursor])
            self._next_due += self._delays[self._cursor] / self._speed
            self._cursor += 1
        return out

    def finish(self) -> List[Frame]:
        """Release whatever is left, right now."""
        out = self._frames[self._cursor:]
        self._cursor = len(self._frames)
        return out

    def play(self, on_frame: Callable[[Frame], None], *,
             sleep: Callable[[float], None] = time.sleep,
             clock: Callable[[], float] = time.monotonic) -> None:
        """Blocking playback: call on_frame for each frame, sleeping in between."""
        while not self.done:
            for fr in self.advance(clock()):
                on_frame(fr)
            if not self.done:
                sleep(max(0.0, self._next_due - clock()))
        logger.debug("playback of %s finished (%d frames)", self.result.algo, len(self._frames))
