"""Pseudo-application that sometimes crashes and sometimes stalls."""

from __future__ import annotations

import os
import secrets
import time

from ..worker import KeyValue


def maybe_crash() -> None:
    """Exit the process a third of the time, stall up to ten seconds another third."""
    roll = secrets.randbelow(1000)
    if roll < 330:
        os._exit(1)
    elif roll < 660:
        time.sleep(secrets.randbelow(10 * 1000) / 1000)


def map_fn(filename: str, contents: str) -> list[KeyValue]:
    """Emit four fixed pairs describing the input file."""
    maybe_crash()
    return [
        KeyValue("a", filename),
        KeyValue("b", str(len(filename.encode("utf-8")))),
        KeyValue("c", str(len(contents.encode("utf-8")))),
        KeyValue("d", "xyzzy"),
    ]


def reduce_fn(key: str, values: list[str]) -> str:
    """Join the sorted values with spaces."""
    maybe_crash()
    return " ".join(sorted(values))