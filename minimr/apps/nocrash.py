"""Same pseudo-application as the crashing one, but it never crashes."""

from __future__ import annotations

from ..worker import KeyValue


def maybe_crash() -> None:
    """Never crash; kept so this application mirrors the crashing one."""


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