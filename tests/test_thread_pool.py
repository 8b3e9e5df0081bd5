import threading
import time

import pytest

from gatekit.thread_pool import Task, TaskQueue, ThreadPool


def _wait_for(pool, count, timeout=5.0):
    deadline = time.monotonic() + timeout
    while pool.tasks_done() < count and time.monotonic() < deadline:
        time.sleep(0.01)
    return pool.tasks_done()


def test_queue_is_fifo():
    queue = TaskQueue()
    tasks = [Task(print, i) for i in range(3)]
    for task in tasks:
        queue.push(task)
    assert len(queue) == 3
    assert [queue.pop() for _ in range(3)] == tasks
    assert len(queue) == 0


def test_pop_empty_returns_none():
    assert TaskQueue().pop() is None


def test_task_run_calls_func_with_arg():
    seen = []
    Task(seen.append, "payload").run()
    assert seen == ["payload"]


def test_pool_runs_all_tasks():
    results = []
    lock = threading.Lock()

    def record(value):
        with lock:
            results.append(value)

    with ThreadPool(4) as pool:
        for i in range(10):
            pool.submit(record, i)
        assert _wait_for(pool, 10) == 10
    assert sorted(results) == list(range(10))


def test_failing_task_is_counted_and_pool_continues():
    results = []

    def boom(_):
        raise RuntimeError("fail")

    with ThreadPool(1) as pool:
        pool.submit(boom, None)
        pool.submit(results.append, "after")
        assert _wait_for(pool, 2) == 2
    assert results == ["after"]


def test_shutdown_stops_threads():
    pool = ThreadPool(3)
    assert len(pool.threads) == 3
    pool.shutdown()
    assert not pool.running
    assert all(not thread.is_alive() for thread in pool.threads)


def test_submit_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(print, None)


@pytest.mark.parametrize("count", [0, -2])
def test_invalid_thread_count(count):
    with pytest.raises(ValueError):
        ThreadPool(count)