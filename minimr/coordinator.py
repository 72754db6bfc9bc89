"""The coordinator: hands out tasks to workers over a UNIX-domain socket."""

from __future__ import annotations

import json
import os
import socketserver
import threading
from dataclasses import asdict, dataclass
from typing import Any, Callable

from .rpc import (
    AssignTaskArgs,
    AssignTaskReply,
    ExampleArgs,
    ExampleReply,
    TaskState,
    TaskType,
    coordinator_sock,
)


@dataclass
class Task:
    """One map or reduce task."""

    id: int
    type: TaskType
    state: TaskState
    file_name: str = ""


class _Handler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        for line in self.rfile:
            response = self.server.dispatch(line)  # type: ignore[attr-defined]
            self.wfile.write(json.dumps(response).encode() + b"\n")
            self.wfile.flush()


class _Server(socketserver.ThreadingUnixStreamServer):
    daemon_threads = True

    def __init__(self, sockname: str, methods: dict[str, tuple[Callable[[Any], Any], type]]):
        self.methods = methods
        super().__init__(sockname, _Handler)

    def dispatch(self, line: bytes) -> dict[str, Any]:
        try:
            request = json.loads(line)
            name = request["method"]
        except (ValueError, KeyError, TypeError) as exc:
            return {"error": f"rpc: bad request: {exc}"}
        if name not in self.methods:
            return {"error": f"rpc: can't find method {name}"}
        handler, args_type = self.methods[name]
        try:
            args = args_type(**request.get("params", {}))
            reply = handler(args)
        except Exception as exc:  # reported to the caller, not fatal to the server
            return {"error": str(exc)}
        return {"result": asdict(reply)}


class Coordinator:
    """Tracks map and reduce tasks and assigns them to workers."""

    def __init__(self, files: list[str], n_reduce: int, sockname: str | None = None):
        self.map_tasks = [
            Task(i, TaskType.MAP_TASK, TaskState.IDLE, name) for i, name in enumerate(files)
        ]
        self.reduce_tasks = [
            Task(i, TaskType.REDUCE_TASK, TaskState.IDLE) for i in range(n_reduce)
        ]
        self.sockname = sockname or coordinator_sock()
        self._lock = threading.Lock()
        self._server: _Server | None = None
        self._thread: threading.Thread | None = None

    def example(self, args: ExampleArgs) -> ExampleReply:
        """Answer the example call with its argument plus one."""
        return ExampleReply(y=args.x + 1)

    def assign_task(self, args: AssignTaskArgs) -> AssignTaskReply:
        """Hand out the first idle map task, or an empty reply if there is none."""
        with self._lock:
            for task in self.map_tasks:
                if task.state is TaskState.IDLE:
                    task.state = TaskState.IN_PROGRESS
                    return AssignTaskReply(
                        task_type=TaskType.MAP_TASK,
                        task_id=task.id,
                        file_name=task.file_name,
                        num_reducers=len(self.reduce_tasks),
                    )
        return AssignTaskReply()

    def serve(self) -> None:
        """Start listening for worker calls in a background thread."""
        if self._server is not None:
            raise RuntimeError("coordinator is already serving")
        try:
            os.remove(self.sockname)
        except FileNotFoundError:
            pass
        methods = {
            "Coordinator.Example": (self.example, ExampleArgs),
            "Coordinator.AssignTask": (self.assign_task, AssignTaskArgs),
        }
        self._server = _Server(self.sockname, methods)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def close(self) -> None:
        """Stop the server and remove its socket."""
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join()
        self._server = None
        self._thread = None
        try:
            os.remove(self.sockname)
        except FileNotFoundError:
            pass

    def done(self) -> bool:
        """Report whether the whole job has finished."""
        return False

    def __enter__(self) -> Coordinator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def make_coordinator(files: list[str], n_reduce: int) -> Coordinator:
    """Create a coordinator for the given input files and start serving."""
    coordinator = Coordinator(files, n_reduce)
    coordinator.serve()
    return coordinator