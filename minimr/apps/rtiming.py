"""Pseudo-application that records whether reduce tasks run in parallel."""

from __future__ import annotations

import string

from ..worker import KeyValue
from .parallel import nparallel


def map_fn(filename: str, contents: str) -> list[KeyValue]:
    """Emit the keys ``a`` to ``j``, each with value ``"1"``."""
    return [KeyValue(key, "1") for key in string.ascii_lowercase[:10]]


def reduce_fn(key: str, values: list[str]) -> str:
    """Return how many reduce workers ran alongside this one."""
    return str(nparallel("reduce"))