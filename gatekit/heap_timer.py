"""Timer events kept in a binary min-heap ordered by expiry time.

The earliest timer always sits at the root, so finding and firing due
timers is cheap. Each timer is identified by an integer id; adding an
id that is already present reschedules it.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

MAX_TIME_EVENT = 64

TimeoutCallback = Callable[[], Any]
Clock = Callable[[], int]

log = logging.getLogger(__name__)


def current_time_ms() -> int:
    """Return the wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class TimerNode:
    """One scheduled timer."""

    timer_id: int
    expires: int
    callback: TimeoutCallback


class TimerHeap:
    """A bounded min-heap of timers keyed by their expiry time in milliseconds."""

    def __init__(self, capacity: int = MAX_TIME_EVENT, clock: Clock = current_time_ms) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._clock = clock
        self._heap: list[TimerNode] = []
        self._index: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, timer_id: object) -> bool:
        return timer_id in self._index

    # ------------------------------------------------------------ heap ops

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].timer_id] = i
        self._index[heap[j].timer_id] = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[parent].expires < heap[i].expires:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, index: int, n: int) -> bool:
        """Move the node at ``index`` down within the first ``n`` slots.

        Return True if it moved.
        """
        heap = self._heap
        i = index
        child = i * 2 + 1
        while child < n:
            if child + 1 < n and heap[child + 1].expires < heap[child].expires:
                child += 1
            if heap[i].expires < heap[child].expires:
                break
            self._swap(i, child)
            i = child
            child = i * 2 + 1
        return i > index

    def _remove_at(self, i: int) -> TimerNode:
        last = len(self._heap) - 1
        if i < last:
            self._swap(i, last)
            if not self._sift_down(i, last):
                self._sift_up(i)
        node = self._heap.pop()
        del self._index[node.timer_id]
        return node

    # ---------------------------------------------------------- public API

    def add(self, timer_id: int, timeout: int, callback: TimeoutCallback) -> None:
        """Schedule ``callback`` to fire ``timeout`` ms from now.

        If ``timer_id`` is already scheduled, its expiry and callback are replaced.
        """
        if timer_id < 0:
            raise ValueError(f"timer id must not be negative, got {timer_id}")
        if not callable(callback):
            raise TypeError("callback must be callable")
        expires = self._clock() + timeout
        position = self._index.get(timer_id)
        if position is not None:
            node = self._heap[position]
            node.expires = expires
            node.callback = callback
            if not self._sift_down(position, len(self._heap)):
                self._sift_up(position)
            return
        if len(self._heap) >= self.capacity:
            raise OverflowError(f"timer heap is full ({self.capacity} timers)")
        self._heap.append(TimerNode(timer_id, expires, callback))
        position = len(self._heap) - 1
        self._index[timer_id] = position
        self._sift_up(position)

    def adjust(self, timer_id: int, timeout: int) -> None:
        """Reschedule an existing timer to fire ``timeout`` ms from now."""
        position = self._index.get(timer_id)
        if position is None:
            raise KeyError(timer_id)
        self._heap[position].expires = self._clock() + timeout
        if not self._sift_down(position, len(self._heap)):
            self._sift_up(position)

    def do_work(self, timer_id: int) -> None:
        """Remove the timer ``timer_id`` and fire its callback now.

        Unknown ids are ignored.
        """
        position = self._index.get(timer_id)
        if position is None:
            return
        node = self._remove_at(position)
        node.callback()

    def pop(self) -> TimerNode:
        """Remove and return the earliest timer without firing it."""
        if not self._heap:
            raise IndexError("pop from an empty timer heap")
        return self._remove_at(0)

    def tick(self) -> None:
        """Fire and remove every timer whose expiry time has been reached."""
        while self._heap and self._heap[0].expires - self._clock() <= 0:
            node = self._remove_at(0)
            node.callback()

    def next_tick(self) -> int:
        """Return ms until the earliest timer fires, 0 if overdue, -1 if none."""
        if not self._heap:
            return -1
        return max(0, self._heap[0].expires - self._clock())

    def entries(self) -> list[tuple[int, int]]:
        """Return ``(timer_id, remaining_ms)`` for every timer in heap order."""
        now = self._clock()
        return [(node.timer_id, node.expires - now) for node in self._heap]