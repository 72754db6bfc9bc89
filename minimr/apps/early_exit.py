"""Counts each input file once; some reduce calls take a long time."""

from __future__ import annotations

import time

from ..worker import KeyValue


def map_fn(filename: str, contents: str) -> list[KeyValue]:
    """Emit ``(filename, "1")`` for the file."""
    return [KeyValue(filename, "1")]


def reduce_fn(key: str, values: list[str]) -> str:
    """Return the number of values, stalling three seconds for some keys."""
    if "sherlock" in key or "tom" in key:
        time.sleep(3)
    return str(len(values))