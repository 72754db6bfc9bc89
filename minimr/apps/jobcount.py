"""Counts how many times map tasks were run, to detect duplicate assignment."""

from __future__ import annotations

import itertools
import os
import random
import time
from pathlib import Path

from ..worker import KeyValue

_PREFIX = "mr-worker-jobcount"
_runs = itertools.count()


def map_fn(filename: str, contents: str) -> list[KeyValue]:
    """Leave a marker file for this invocation, stall a few seconds, emit one pair."""
    marker = Path(f"{_PREFIX}-{os.getpid()}-{next(_runs)}")
    marker.write_text("x")
    time.sleep((2000 + random.randrange(3000)) / 1000)
    return [KeyValue("a", "x")]


def reduce_fn(key: str, values: list[str]) -> str:
    """Return the number of marker files in the current directory."""
    return str(sum(1 for name in os.listdir(".") if name.startswith(_PREFIX)))