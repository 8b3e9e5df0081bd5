# gatekit

Building blocks for gateway-style services. The package uses only the standard library.

| Module | What it provides |
| --- | --- |
| `gatekit.ring_buffer` | `RingBuffer`: a fixed-size byte buffer with read and write positions |
| `gatekit.hashtable` | `HashTable`: a string-to-string table with ten chained buckets, and `bucket_index` |
| `gatekit.kmp` | `kmp` and `prefix_table`: Knuth–Morris–Pratt substring search |
| `gatekit.linked_list` | `LinkedList` and `ListNode`: a doubly linked list with node handles |
| `gatekit.thread_pool` | `ThreadPool`, `TaskQueue` and `Task`: worker threads fed from a FIFO queue |
| `gatekit.rbtree` | `RedBlackTree`, `RBNode` and `Color`: a red-black tree of unique keys |
| `gatekit.heap_timer` | `TimerHeap`, `TimerNode` and `current_time_ms`: timers in a min-heap |
| `gatekit.node_tree` | `ServiceNode`, `Method`, `find_process` and `build_default_tree`: services looked up by path |
| `gatekit.supervisor` | `Supervisor`, `RestartLimiter`, `is_process_running` and the `gatekit-supervisor` command |

## Installation

```
pip install gatekit
```

To run the tests, install the `test` extra and run pytest:

```
pip install "gatekit[test]"
pytest
```

## Ring buffer

`RingBuffer(size=4096)` stores bytes between a read position and a write position.
Writes never fail. If there is not enough room, `append` drops the oldest stored bytes.
If the data is larger than the whole buffer, `append` keeps only its last `size` bytes.

```python
from gatekit.ring_buffer import RingBuffer

buf = RingBuffer(4096)
buf.append_str("it a test!")
buf.readable_bytes()            # 10
buf.retrieve_all_to_bytes()     # b"it a test!"
```

These methods read and move the positions:

- `peek` returns the unread data.
- `retrieve` and `retrieve_until` consume unread data.
- `has_written` advances the write position.
- `retrieve_all` and `clear` empty the buffer.

`read_fd(fd)` reads from a file descriptor into the buffer and `write_fd(fd)` writes the
unread data out. Each returns the number of bytes moved.

## Hash table

```python
from gatekit.hashtable import HashTable

table = HashTable()
table.insert("a", "apple")      # returns the bucket index
table.find("a")                 # "apple"
table.find("z")                 # None
table.count("a")                # 1
"a" in table                    # True
```

Inserting an existing key replaces its value. Keys and values must be strings; anything
else raises `TypeError`. `display()` returns a text listing of every bucket.

## Substring search

```python
from gatekit.kmp import kmp, prefix_table

kmp("abxabcabcaby", "abcaby")   # 6
kmp("abc", "xyz")               # -1
kmp("abc", "")                  # 0
prefix_table("abcaby")          # [0, 0, 0, 1, 2, 0]
```

## Linked list

`add_head` and `add_tail` take a `ListNode` or a plain value and return the node.
A node can belong to only one list at a time.

```python
from gatekit.linked_list import LinkedList

items = LinkedList()
for score in range(10):
    items.add_head(score)
list(items)                     # [9, 8, ..., 0]
items.nth(1).value              # 9
items.remove(items.first())
len(items)                      # 9
```

The list also provides:

- `first()` and `last()` return the end nodes.
- `nth(index)` is 1-based and raises `IndexError` when the index is out of range.
- `reversed(lst)` iterates from the tail.
- `clear()` empties the list.
- `merge(other)` moves every node of `other` onto the end of this list.
- `merge_range(start, end, other)` appends the run of `other` from `start` to `end` and
  discards the rest of `other`. It raises `ValueError` if `end` does not come after `start`.

## Thread pool

```python
from gatekit.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    for i in range(10):
        pool.submit(print, i)
```

`submit(func, arg)` queues `func(arg)` and returns the `Task`. `tasks_done()` counts the
tasks that have finished. An exception raised by a task is logged, and the worker goes on
to the next task.

`shutdown()` stops the workers after their current task. Leaving the `with` block calls
it. **Tasks still waiting in the queue at shutdown are discarded.** Wait on `tasks_done()`
first if every task must run. Submitting after shutdown raises `RuntimeError`.

## Red-black tree

```python
from gatekit.rbtree import RedBlackTree

tree = RedBlackTree()
for key in (10, 40, 30, 60, 90, 70, 20, 50, 80):
    tree.insert(key)
tree.inorder()                  # [10, 20, 30, 40, 50, 60, 70, 80, 90]
tree.minimum(), tree.maximum()  # (10, 90)
30 in tree                      # True
tree.delete(30)                 # True
```

Error cases:

- Inserting a key that is already present raises `ValueError`.
- `minimum` and `maximum` on an empty tree raise `ValueError`.

`preorder`, `inorder` and `postorder` return lists of keys. `describe()` returns one line
per node with its colour and its position under its parent.

## Timers

`TimerHeap(capacity=64, clock=current_time_ms)` keeps timers ordered by expiry time in
milliseconds. You can pass any clock function, which is useful in tests.

```python
from gatekit.heap_timer import TimerHeap

timers = TimerHeap()
timers.add(1, 500, lambda: print("fired"))   # fires 500 ms from now
timers.next_tick()              # ms until the earliest timer, 0 if overdue, -1 if none
timers.tick()                   # fire and remove every due timer
```

Adding an id that is already scheduled replaces its expiry and callback. Adding a new id
to a full heap raises `OverflowError`. The heap also provides:

- `adjust(timer_id, timeout)` reschedules a timer.
- `do_work(timer_id)` removes a timer and fires it at once.
- `pop()` removes the earliest timer without firing it.
- `entries()` lists `(timer_id, remaining_ms)` pairs.

## Service tree

`find_process(nodes, path)` splits a path on `/` and matches one level at a time. It
returns `(handler, node)` for the last component. If the path does not lead to a node with
a handler, it raises `ServiceNotFound`.

```python
from gatekit.node_tree import build_default_tree, find_process

nodes = build_default_tree()
handler, node = find_process(nodes, "logInfo/config/info")
handler(node, None)
```

`build_default_tree()` returns the `system`, `logInfo` and `network` services. Their
handlers only write a log message.

## Supervisor

The `gatekit-supervisor` command reads a pid file every few seconds. If the file names no
running process, the command starts the program again.

```
gatekit-supervisor --pid-file /var/run/gateway.pid --interval 3 /path/to/program [args...]
```

Defaults:

- `--pid-file` defaults to `/var/run/gateway.pid`.
- `--interval` defaults to 3 seconds.
- The program defaults to `/home/root/gateWay`.

Restarts are limited by a `RestartLimiter`. A restart within 5 seconds of the previous one
counts toward a burst. After more than 5 such restarts, the supervisor waits 10 seconds
before the next one.

From Python:

- `Supervisor(command, pid_file, interval, limiter)` manages one program.
- `check_once()` runs a single check.
- `run()` loops until `stop()` is called.
- `is_process_running(pid_file)` tests a pid file on its own.

## What this package does not do

- The package contains no gateway program of its own.
- The supervisor does not write the pid file. The program it starts must write its own
  pid to that file, or the supervisor will keep starting new copies.
- The supervisor does not detach into the background.
- The service tree resolves paths to handlers only. It provides no server or network
  protocol to reach them.