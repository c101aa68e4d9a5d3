# gridpath/app/settings.py
#!/usr/bin/env python3
"""
Viewer settings: defaults, overridden by GRIDPATH_* environment variables,
overridden by --key=value command-line arguments.

    GRIDPATH_ROWS / --rows=        grid rows          (20)
    GRIDPATH_COLS / --cols=        grid columns       (20)
    GRIDPATH_ALGO / --algo=        dijkstra | astar   (dijkstra)
    GRIDPATH_MAP  / --map=         preset map JSON    (none)
    GRIDPATH_LOG_LEVEL / --log-level=                 (INFO)
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence
import logging
import os
import sys

from gridpath.core.search import ALGORITHMS

DEFAULT_ROWS = 20
DEFAULT_COLS = 20
MAX_DIM = 200

_KEYS = ("rows", "cols", "algo", "map", "log-level")


@dataclass
class Settings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    algo: str = "dijkstra"
    map_path: Optional[str] = None
    log_level: str = "INFO"


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     env: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    raw = {}
    for key in _KEYS:
        v = env.get("GRIDPATH_" + key.upper().replace("-", "_"))
        if v:
            raw[key] = v
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            raise ValueError(f"unrecognised argument {arg!r}; use --key=value")
        key, value = arg[2:].split("=", 1)
        if key not in _KEYS:
            raise ValueError(f"unknown setting {key!r}; expected one of {list(_KEYS)}")
        raw[key] = value

    s = Settings()
    for key in ("rows", "cols"):
        if key in raw:
            try:
                n = int(raw[key])
            except ValueError:
                raise ValueError(f"{key} must be an integer, got {raw[key]!r}") from None
            if not 1 <= n <= MAX_DIM:
                raise ValueError(f"{key} must be in 1..{MAX_DIM}, got {n}")
            setattr(s, key, n)
    if "algo" in raw:
        algo = raw["algo"].strip().lower()
        if algo not in ALGORITHMS:
            raise ValueError(f"unknown algorithm {raw['algo']!r}; expected one of {sorted(ALGORITHMS)}")
        s.algo = algo
    if "map" in raw:
        s.map_path = raw["map"]
    if "log-level" in raw:
        level = raw["log-level"].upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {raw['log-level']!r}")
        s.log_level = level
    return s
