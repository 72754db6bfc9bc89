"""Run a map/reduce application sequentially in a single process."""

from __future__ import annotations

import os
import sys
from itertools import groupby
from operator import attrgetter
from pathlib import Path
from typing import Callable, Iterable, Sequence, Union

from .plugins import load_plugin
from .worker import KeyValue

_OUTPUT = "mr-out-0"

PathLike = Union[str, "os.PathLike[str]"]


def run_sequential(
    mapf: Callable[[str, str], list[KeyValue]],
    reducef: Callable[[str, list[str]], str],
    filenames: Iterable[str],
    output: PathLike = _OUTPUT,
) -> None:
    """Map every input file, reduce each distinct key, and write ``key value`` lines.

    All input files are read and mapped before the output file is created;
    lines are written in ascending key order.
    """
    intermediate: list[KeyValue] = []
    for filename in filenames:
        contents = Path(filename).read_text(encoding="utf-8", errors="surrogateescape")
        intermediate.extend(mapf(filename, contents))

    intermediate.sort(key=attrgetter("key"))

    with open(output, "w", encoding="utf-8", errors="surrogateescape", newline="") as out:
        for key, group in groupby(intermediate, key=attrgetter("key")):
            result = reducef(key, [kv.value for kv in group])
            out.write(f"{key} {result}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``mrsequential xxx.so inputfiles...``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: mrsequential xxx.so inputfiles...", file=sys.stderr)
        return 1

    try:
        mapf, reducef = load_plugin(args[0])
    except LookupError as exc:
        print(exc.args[0], file=sys.stderr)
        return 1

    try:
        run_sequential(mapf, reducef, args[1:], _OUTPUT)
    except OSError as exc:
        print(f"cannot open {exc.filename or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())