"""Worker side: key/value pairs, partitioning and calls to the coordinator."""

from __future__ import annotations

import json
import socket
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

from .rpc import (
    AssignTaskArgs,
    AssignTaskReply,
    ExampleArgs,
    ExampleReply,
    TaskType,
    coordinator_sock,
)

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193

R = TypeVar("R")


@dataclass(frozen=True)
class KeyValue:
    """A key/value pair emitted by a map function."""

    key: str
    value: str


def ihash(key: str) -> int:
    """Hash a key with 32-bit FNV-1a, masked to a non-negative int."""
    h = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        h = ((h ^ byte) * _FNV_PRIME) & 0xFFFFFFFF
    return h & 0x7FFFFFFF


def worker(
    mapf: Callable[[str, str], list[KeyValue]],
    reducef: Callable[[str, list[str]], str],
) -> list[Path]:
    """Ask the coordinator for a task and run it if it is a map task.

    Intermediate pairs are partitioned by ``ihash(key) % num_reducers`` into
    files named ``mr-<task>-<reducer>`` in the current directory, one JSON
    object per line. Returns the paths written.
    """
    reply = call("Coordinator.AssignTask", AssignTaskArgs(), AssignTaskReply)
    if reply is None or reply.task_type is not TaskType.MAP_TASK or not reply.file_name:
        return []
    if reply.num_reducers <= 0:
        raise ValueError("map task assigned without reducers")

    contents = Path(reply.file_name).read_text()
    buckets: list[list[KeyValue]] = [[] for _ in range(reply.num_reducers)]
    for kv in mapf(reply.file_name, contents):
        buckets[ihash(kv.key) % reply.num_reducers].append(kv)

    paths = []
    for reducer, bucket in enumerate(buckets):
        path = Path(f"mr-{reply.task_id}-{reducer}")
        with path.open("w") as out:
            for kv in bucket:
                out.write(json.dumps(asdict(kv)) + "\n")
        paths.append(path)
    return paths


def call_example() -> None:
    """Send the example call and print the answer."""
    reply = call("Coordinator.Example", ExampleArgs(x=99), ExampleReply)
    if reply is not None:
        print(f"reply.Y {reply.y}")
    else:
        print("call failed!")


def call_assign_task() -> None:
    """Ask for a task and print what came back."""
    reply = call("Coordinator.AssignTask", AssignTaskArgs(), AssignTaskReply)
    if reply is not None:
        print(f"Got task: {reply}")
    else:
        print("call failed!")


def call(rpcname: str, args: Any, reply_type: Callable[..., R]) -> R | None:
    """Send one call to the coordinator and wait for the reply.

    Returns the reply, or None (after printing the error) if the call
    failed. Raises ConnectionError if the coordinator cannot be reached.
    """
    conn = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        conn.connect(coordinator_sock())
    except OSError as exc:
        conn.close()
        raise ConnectionError(f"dialing: {exc}") from exc

    request = {"method": rpcname, "params": asdict(args)}
    with conn, conn.makefile("rwb") as stream:
        stream.write(json.dumps(request).encode() + b"\n")
        stream.flush()
        line = stream.readline()

    if not line:
        print("unexpected EOF")
        return None
    response = json.loads(line)
    if response.get("error") is not None:
        print(response["error"])
        return None
    return reply_type(**response["result"])