"""Word count: emits each word with a count of one and sums them per word."""

from __future__ import annotations

from itertools import groupby

from ..worker import KeyValue


def _words(text: str) -> list[str]:
    """Split text into maximal runs of letters."""
    return ["".join(run) for is_letter, run in groupby(text, str.isalpha) if is_letter]


def map_fn(filename: str, contents: str) -> list[KeyValue]:
    """Emit ``(word, "1")`` for every word in the contents; the filename is ignored."""
    return [KeyValue(word, "1") for word in _words(contents)]


def reduce_fn(key: str, values: list[str]) -> str:
    """Return the number of occurrences of the word."""
    return str(len(values))