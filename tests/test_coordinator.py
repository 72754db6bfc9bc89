import json
import os
import socket

import pytest

from minimr.coordinator import Coordinator, Task, make_coordinator
from minimr.rpc import AssignTaskArgs, ExampleArgs, TaskState, TaskType, coordinator_sock


@pytest.fixture
def coordinator():
    c = make_coordinator(["fileA.txt", "fileB.txt"], 1)
    yield c
    c.close()


def test_initial_map_task_assignment(coordinator):
    reply = coordinator.assign_task(AssignTaskArgs())
    assert reply.task_type is TaskType.MAP_TASK
    assert reply.file_name == "fileA.txt"
    assert reply.task_id == 0
    assert reply.num_reducers == 1


def test_assignment_marks_task_in_progress(coordinator):
    coordinator.assign_task(AssignTaskArgs())
    assert coordinator.map_tasks[0].state is TaskState.IN_PROGRESS
    assert coordinator.map_tasks[1].state is TaskState.IDLE


def test_assignments_follow_file_order(coordinator):
    first = coordinator.assign_task(AssignTaskArgs())
    second = coordinator.assign_task(AssignTaskArgs())
    assert (first.task_id, first.file_name) == (0, "fileA.txt")
    assert (second.task_id, second.file_name) == (1, "fileB.txt")


def test_no_idle_tasks_gives_empty_reply(coordinator):
    coordinator.assign_task(AssignTaskArgs())
    coordinator.assign_task(AssignTaskArgs())
    reply = coordinator.assign_task(AssignTaskArgs())
    assert reply.file_name == ""
    assert reply.task_id == 0
    assert reply.num_reducers == 0


def test_tasks_built_from_inputs():
    c = Coordinator(["x.txt", "y.txt", "z.txt"], 4)
    assert c.map_tasks == [
        Task(0, TaskType.MAP_TASK, TaskState.IDLE, "x.txt"),
        Task(1, TaskType.MAP_TASK, TaskState.IDLE, "y.txt"),
        Task(2, TaskType.MAP_TASK, TaskState.IDLE, "z.txt"),
    ]
    assert [t.id for t in c.reduce_tasks] == [0, 1, 2, 3]
    assert all(t.type is TaskType.REDUCE_TASK and t.file_name == "" for t in c.reduce_tasks)


def test_example_adds_one(coordinator):
    assert coordinator.example(ExampleArgs(x=99)).y == 100


def test_done_is_false(coordinator):
    assert coordinator.done() is False


def _raw_request(payload):
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as conn:
        conn.connect(coordinator_sock())
        with conn.makefile("rwb") as stream:
            stream.write(json.dumps(payload).encode() + b"\n")
            stream.flush()
            return json.loads(stream.readline())


_ASSIGN = {"method": "Coordinator.AssignTask", "params": {}}


def test_socket_created_and_removed():
    c = make_coordinator(["fileA.txt"], 1)
    try:
        assert os.path.exists(coordinator_sock())
        response = _raw_request(_ASSIGN)
        assert response["result"]["file_name"] == "fileA.txt"
    finally:
        c.close()
    assert not os.path.exists(coordinator_sock())
    with pytest.raises(OSError):
        _raw_request(_ASSIGN)


def test_serve_twice_raises(coordinator):
    with pytest.raises(RuntimeError):
        coordinator.serve()


def test_unknown_method_reports_error(coordinator):
    response = _raw_request({"method": "Coordinator.Nothing", "params": {}})
    assert "Coordinator.Nothing" in response["error"]


def test_wire_assign_task(coordinator):
    response = _raw_request(_ASSIGN)
    assert response["result"]["file_name"] == "fileA.txt"
    assert response["result"]["task_type"] == int(TaskType.MAP_TASK)


def test_context_manager_closes():
    with make_coordinator(["fileA.txt"], 1):
        response = _raw_request(_ASSIGN)
        assert response["result"]["task_id"] == 0
    assert not os.path.exists(coordinator_sock())
    with pytest.raises(OSError):
        _raw_request(_ASSIGN)