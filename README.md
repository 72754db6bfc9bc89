# minimr

A small MapReduce framework. A coordinator hands out map tasks over a
local UNIX-domain socket, a worker asks it for work and runs the map step
of an application module such as word count, and a sequential runner
performs a whole map/reduce job in one process.

## Installing

```
pip install .
```

Requires Python 3.10 or later on a POSIX system (the coordinator and
worker talk over a UNIX-domain socket).

## Applications

Applications live in `minimr.apps`. Each one provides a
`map_fn(filename, contents)` that returns a list of
`minimr.worker.KeyValue` pairs and a `reduce_fn(key, values)` that
returns one string per key.

| Name         | What it does                                                              |
|--------------|---------------------------------------------------------------------------|
| `wc`         | Word count: one `(word, "1")` pair per run of letters, reduced to counts  |
| `indexer`    | Inverted index: for each word, the document count and sorted documents    |
| `crash`      | Exits a third of the time, stalls up to ten seconds another third         |
| `nocrash`    | The same output as `crash`, without the failures                          |
| `early_exit` | One `(filename, "1")` pair per file; keys with `sherlock` or `tom` stall three seconds in reduce |
| `jobcount`   | Leaves an `mr-worker-jobcount-*` marker per map call; reduce counts them  |
| `mtiming`    | Reports each map worker's start time and how many map workers ran at once |
| `rtiming`    | Emits keys `a` to `j`; reduce reports how many reduce workers ran at once |

`minimr.apps.parallel.nparallel(phase)` is the helper behind the two
timing applications: it leaves an `mr-worker-<phase>-<pid>` file in the
current directory for one second and counts such files whose process is
alive.

`minimr.plugins.load_plugin(name)` returns the `(map_fn, reduce_fn)` pair
for an application. `name` may be a bare name such as `wc` or a path such
as `../mrapps/wc.so`; the directory and a `.so` or `.py` suffix are
ignored. An unknown name raises `LookupError`.

## Running a job sequentially

`mrsequential` runs a whole job in one process. It reads every input
file, runs map over each one, sorts the intermediate pairs by key, and
calls reduce once for each distinct key. The results go to `mr-out-0`,
one `key value` line per key, in ascending key order:

```
mrsequential wc pg-*.txt
head mr-out-0
```

It exits with status 1 and a message on standard error if the
application is unknown or an input file cannot be read.

From Python, the same work is done by
`minimr.sequential.run_sequential(mapf, reducef, filenames, output)`.

## Running a coordinator and a worker

Start a coordinator with the input files. It creates one map task per
file and 10 reduce tasks, and listens on the socket named by
`minimr.rpc.coordinator_sock()` (`/var/tmp/5840-mr-<uid>`):

```
mrcoordinator pg-*.txt
```

Then start a worker in another terminal, naming the application to run:

```
mrworker wc
```

The worker asks the coordinator for a task. If it gets a map task, it
reads the input file, runs the application's `map_fn`, and writes the
pairs into files `mr-<task>-<reducer>` in the current directory, one JSON
object per line, choosing the reducer with `ihash(key) % num_reducers`.
If the coordinator cannot be reached, `mrworker` exits with status 1.

## Using the library

```python
from minimr.coordinator import Coordinator
from minimr.rpc import AssignTaskArgs

with Coordinator(["a.txt", "b.txt"], 1) as coordinator:
    coordinator.serve()
    reply = coordinator.assign_task(AssignTaskArgs())
    print(reply.task_type, reply.task_id, reply.file_name, reply.num_reducers)
```

`minimr.coordinator.make_coordinator(files, n_reduce)` creates a
coordinator on the default socket and starts serving; `close()` stops the
server and removes the socket. Map tasks are handed out in input-file
order; once all are in progress, `assign_task` returns an empty
`AssignTaskReply`.

A worker process talks to a running coordinator with
`minimr.worker.call(rpcname, args, reply_type)`, which returns the reply
or `None` if the call failed, or with the `call_example()` and
`call_assign_task()` helpers, which print the result. The calls served
are `Coordinator.Example` (replies with its argument plus one) and
`Coordinator.AssignTask`. `minimr.worker.ihash(key)` is 32-bit FNV-1a
masked to a non-negative integer.

## What it does not do

The distributed mode covers only the first step of a job:

- The coordinator never hands out reduce tasks, has no deadlines, and
  never reassigns a task whose worker has stalled or died.
- `Coordinator.done()` always returns `False`, so `mrcoordinator` keeps
  running until it is interrupted.
- `mrworker` runs at most one map task and then exits; it never runs
  reduce and writes no `mr-out-*` files.

For a complete job with output, use `mrsequential`.

## Tests

```
pip install .[test]
pytest
```