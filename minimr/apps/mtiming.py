"""Pseudo-application that records whether map tasks run in parallel."""

from __future__ import annotations

import os
import time

from ..worker import KeyValue
from .parallel import nparallel


def map_fn(filename: str, contents: str) -> list[KeyValue]:
    """Emit this worker's start time and how many map workers ran alongside it."""
    started = time.time()
    pid = os.getpid()
    running = nparallel("map")
    return [
        KeyValue(f"times-{pid}", f"{started:.1f}"),
        KeyValue(f"parallel-{pid}", str(running)),
    ]


def reduce_fn(key: str, values: list[str]) -> str:
    """Join the sorted values with spaces."""
    return " ".join(sorted(values))