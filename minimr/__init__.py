"""A small MapReduce framework: a task coordinator, a worker, a sequential runner and bundled applications."""

__version__ = "0.1.0"