# midware

A handful of small building blocks for robotics-style middleware:

- `midware.circular_buffer`: `CircularBuffer`, a fixed-capacity, thread-safe
  ring buffer. Its default capacity is 6. Reading from an empty buffer raises
  `BufferEmptyError`, and writing to a full one raises `BufferFullError`.
  `describe()` returns a report of the buffer's length, its reader and writer
  indices and its raw slots.
- `midware.matrix`: `Matrix`, a small dense matrix. It supports matrix and
  scalar multiplication with `*`, `dot()` of a 1 x N row vector with an N x 1
  column vector, and `cross()` of two 1 x 3 vectors. It also provides
  `Matrix.filled()`, `set_value()`, `to_lists()`, `format()` and `shape`.
  A mismatch in dimensions raises `ValueError`.
- `midware.metrics`: `PriorityQueue`, which serves items largest-first or
  smallest-first by an optional key. Items with equal keys come out in the
  order they were pushed. The module also has `Metrics`, a record with an
  `id` and a `score`.
- `midware.csv_parser`: `split_fields()` splits a line on commas, and
  `parse_lines()` yields each line together with its fields.
- `midware.scheduler`: `Scheduler`, which runs callables periodically, each
  on its own worker thread.
  - `schedule(task, freq_hz)` returns an id.
  - `deschedule(task_id)` returns that id, or `None` if no such task is
    scheduled.
  - `shutdown()`, or leaving a `with` block, stops every task.
- `midware.driver`: `ImuDriver` (over `TcpProtocol`) and `LidarDriver` (over
  `UdpProtocol`), both built on `Driver` and `Socket`. The protocols only print
  what they would do. Each class takes an optional text stream to write to.
- `midware.node`: ZeroMQ `Publisher`, `Subscriber`, `Server` and `Client`
  wrappers that exchange strings. They are created through a shared
  `NodeHandle`, which closes them all, and its context, when it is closed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from midware.circular_buffer import CircularBuffer, BufferEmptyError

buf = CircularBuffer(6)
buf.write(1)
buf.write(2)
assert buf.read() == 1
assert len(buf) == 1
```

```python
from midware.matrix import Matrix

a = Matrix([[1.0, 1.2, 0.5]])
b = Matrix([[1.5, 2.0, 0.8]])
print(a.cross(b).format())
```

```python
from midware.metrics import Metrics, PriorityQueue

queue = PriorityQueue(key=lambda m: m.score, largest_first=True)
for score in (3.14, 1.41, 2.71):
    queue.push(Metrics("", score))
print([m.score for m in queue.drain()])
```

```python
import time
from midware.scheduler import Scheduler

with Scheduler() as scheduler:
    task_id = scheduler.schedule(lambda: print("tick"), 2.0)
    time.sleep(2)
```

The following example blocks until a server answers on that endpoint:

```python
from midware.node import NodeHandle

with NodeHandle() as handle:
    client = handle.create_client("tcp://localhost:5555")
    print(client.request("Message #0"))
```

## Commands

Each demonstration is installed as a command:

| Command                   | What it does                                                                    |
|---------------------------|---------------------------------------------------------------------------------|
| `midware-circular-buffer` | Runs a fixed series of reads and writes, then prints the buffer state           |
| `midware-matrix`          | Prints the example matrices, products, a dot product and a cross product        |
| `midware-metrics`         | Drains integer and metric queues in both orders                                 |
| `midware-csv [PATH]`      | Prints each line of a CSV file and then its fields (default `../data.csv`)      |
| `midware-scheduler`       | Prints `func` periodically (`--frequency`, default 2 Hz; `--duration`, default 5 s) |
| `midware-driver`          | Brings up, polls and shuts down an IMU and a LIDAR driver                       |
| `midware-publisher`       | Publishes `--message` (default `test`) on `--endpoint` (default `tcp://*:5556`) |
| `midware-subscriber`      | Subscribes to `--endpoint` (default `tcp://localhost:5556`)                     |
| `midware-server`          | Replies `Processed <request>` on `--endpoint` (default `tcp://*:5555`)          |
| `midware-client`          | Sends `Message #0`, `Message #1`, … to `--endpoint` (default `tcp://localhost:5555`) |

Options for the node commands:

- All four take `--count` to stop after that many messages or requests.
  Without it, the publisher, subscriber and server run until interrupted.
- `midware-publisher` also takes `--interval`, a number of seconds to wait
  between messages.
- `midware-client` asks how many requests to send when `--count` is not given.

Start `midware-server` in one terminal and `midware-client` in another to
see the request/reply pattern. Likewise, run `midware-publisher` with
`midware-subscriber` for publish/subscribe.

## What it does not do

Messages travel as plain UTF-8 strings. There is no serialization of
structured data. The drivers do not talk to real devices; their protocols
only report each step.