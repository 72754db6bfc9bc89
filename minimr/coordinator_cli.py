"""Command that starts the coordinator and waits for the job to finish."""

from __future__ import annotations

import sys
import time
from typing import Sequence

from .coordinator import make_coordinator

_N_REDUCE = 10


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``mrcoordinator inputfiles...``."""
    files = list(sys.argv[1:] if argv is None else argv)
    if not files:
        print("Usage: mrcoordinator inputfiles...", file=sys.stderr)
        return 1

    coordinator = make_coordinator(files, _N_REDUCE)
    with coordinator:
        while not coordinator.done():
            time.sleep(1)
        time.sleep(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())