"""Inverted index: maps each word to the documents that contain it."""

from __future__ import annotations

from itertools import groupby

from ..worker import KeyValue


def _words(text: str) -> list[str]:
    return ["".join(run) for is_letter, run in groupby(text, str.isalpha) if is_letter]


def map_fn(document: str, value: str) -> list[KeyValue]:
    """Emit ``(word, document)`` once for each distinct word in the document."""
    return [KeyValue(word, document) for word in dict.fromkeys(_words(value))]


def reduce_fn(key: str, values: list[str]) -> str:
    """Return the document count followed by the sorted, comma-joined documents."""
    documents = sorted(values)
    return f"{len(documents)} {','.join(documents)}"