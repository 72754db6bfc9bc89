"""Message types exchanged between the coordinator and its workers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum


class TaskType(IntEnum):
    """Kind of work handed to a worker."""

    MAP_TASK = 0
    REDUCE_TASK = 1
    WAIT_TASK = 2
    DONE_TASK = 3


class TaskState(IntEnum):
    """Progress of a single task as tracked by the coordinator."""

    IDLE = 0
    IN_PROGRESS = 1
    COMPLETED = 2


@dataclass
class ExampleArgs:
    """Arguments of the example call."""

    x: int = 0


@dataclass
class ExampleReply:
    """Reply to the example call."""

    y: int = 0


@dataclass
class AssignTaskArgs:
    """Arguments a worker sends when asking for a task."""


@dataclass
class AssignTaskReply:
    """A task assignment sent back to a worker."""

    task_type: TaskType = TaskType.MAP_TASK
    task_id: int = 0
    file_name: str = ""
    num_reducers: int = 0

    def __post_init__(self) -> None:
        self.task_type = TaskType(self.task_type)


def coordinator_sock() -> str:
    """Return the per-user UNIX-domain socket path of the coordinator."""
    return f"/var/tmp/5840-mr-{os.getuid()}"