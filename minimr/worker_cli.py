"""Command that starts a worker running one of the bundled applications."""

from __future__ import annotations

import sys
from typing import Sequence

from .plugins import load_plugin
from .worker import worker


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``mrworker xxx.so``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: mrworker xxx.so", file=sys.stderr)
        return 1

    try:
        mapf, reducef = load_plugin(args[0])
    except LookupError as exc:
        print(exc.args[0], file=sys.stderr)
        return 1

    try:
        worker(mapf, reducef)
    except ConnectionError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())