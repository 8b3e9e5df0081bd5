"""A fixed-size pool of worker threads fed from a FIFO task queue."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)


@dataclass
class Task:
    """A callable and the single argument it is called with."""

    func: Callable[[Any], Any]
    arg: Any = None

    def run(self) -> None:
        self.func(self.arg)


class TaskQueue:
    """Thread-safe first-in, first-out queue of tasks."""

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()
        self._lock = threading.Lock()

    def push(self, task: Task) -> None:
        with self._lock:
            self._tasks.append(task)

    def pop(self) -> Task | None:
        """Remove and return the oldest task, or None if the queue is empty."""
        with self._lock:
            return self._tasks.popleft() if self._tasks else None

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)


class ThreadPool:
    """Runs submitted tasks on ``thread_count`` worker threads.

    Shutting down stops the workers once their current task ends;
    tasks still queued are discarded.
    """

    def __init__(self, thread_count: int) -> None:
        if thread_count <= 0:
            raise ValueError(f"thread_count must be positive, got {thread_count}")
        self.queue = TaskQueue()
        self._cond = threading.Condition()
        self._running = True
        self._tasks_done = 0
        self._threads = tuple(
            threading.Thread(target=self._worker, name=f"pool-worker-{i}", daemon=True)
            for i in range(thread_count)
        )
        for thread in self._threads:
            thread.start()

    @property
    def threads(self) -> tuple[threading.Thread, ...]:
        return self._threads

    @property
    def running(self) -> bool:
        return self._running

    def _worker(self) -> None:
        while True:
            with self._cond:
                while self._running and not len(self.queue):
                    self._cond.wait()
                if not self._running:
                    return
                task = self.queue.pop()
            if task is None:
                continue
            try:
                task.run()
            except Exception:
                log.exception("task %r raised", task)
            with self._cond:
                self._tasks_done += 1

    def submit(self, func: Callable[[Any], Any], arg: Any = None) -> Task:
        """Queue ``func(arg)`` for execution and return the task."""
        task = Task(func, arg)
        with self._cond:
            if not self._running:
                raise RuntimeError("thread pool has been shut down")
            self.queue.push(task)
            self._cond.notify()
        return task

    def tasks_done(self) -> int:
        """Number of tasks that have finished running."""
        with self._cond:
            return self._tasks_done

    def shutdown(self) -> None:
        """Stop all workers, wait for them and drop pending tasks."""
        with self._cond:
            self._running = False
            self._cond.notify_all()
        for thread in self._threads:
            if thread is not threading.current_thread():
                thread.join()
        self.queue.clear()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()