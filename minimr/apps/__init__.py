"""MapReduce applications providing map_fn and reduce_fn, and the parallelism helper they share."""

__all__ = [
    "crash",
    "early_exit",
    "indexer",
    "jobcount",
    "mtiming",
    "nocrash",
    "parallel",
    "rtiming",
    "wc",
]