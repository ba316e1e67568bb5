from __future__ import annotations

import threading
import time

from utils.background_worker import BackgroundWorker


def immediate(callback, *args):
    callback(*args)


def test_background_worker_runs_task_with_arguments():
    done = threading.Event()
    seen = []

    def task(value, *, scale):
        seen.append(value * scale)
        done.set()

    with BackgroundWorker(dispatcher=immediate) as worker:
        worker.submit(task, 3, scale=2)
        assert done.wait(1.0)

    assert seen == [6]


def test_background_worker_delivers_result_to_on_success():
    delivered = threading.Event()
    results = []

    def on_success(value):
        results.append(value)
        delivered.set()

    worker = BackgroundWorker(dispatcher=immediate)
    worker.submit(lambda: "catalog", on_success=on_success)

    assert delivered.wait(1.0)
    assert results == ["catalog"]
    worker.shutdown()


def test_background_worker_delivers_exception_to_on_error():
    delivered = threading.Event()
    errors = []

    def failing():
        raise RuntimeError("disk unplugged")

    def on_error(exc):
        errors.append(exc)
        delivered.set()

    worker = BackgroundWorker(dispatcher=immediate)
    worker.submit(failing, on_success=lambda _value: errors.append("wrong"), on_error=on_error)

    assert delivered.wait(1.0)
    assert len(errors) == 1
    assert isinstance(errors[0], RuntimeError)
    worker.shutdown()


def test_background_worker_uses_dispatcher_for_callbacks():
    dispatched = []
    finished = threading.Event()

    def dispatcher(callback, *args):
        dispatched.append(callback)
        callback(*args)
        finished.set()

    worker = BackgroundWorker(dispatcher=dispatcher)
    on_success = lambda _value: None  # noqa: E731
    worker.submit(lambda: 1, on_success=on_success)

    assert finished.wait(1.0)
    assert dispatched == [on_success]
    worker.shutdown()


def test_background_worker_skips_callbacks_after_shutdown():
    release = threading.Event()
    delivered = []

    def task():
        release.wait(1.0)
        return "late"

    worker = BackgroundWorker(dispatcher=immediate)
    worker.submit(task, on_success=delivered.append)
    threading.Timer(0.1, release.set).start()
    worker.shutdown(timeout=2.0)

    assert delivered == []


def test_background_worker_is_stopped():
    worker = BackgroundWorker()

    assert not worker.is_stopped()

    worker.shutdown()

    assert worker.is_stopped()


def test_background_worker_shutdown_waits_for_threads():
    worker = BackgroundWorker(dispatcher=immediate)
    completed = []

    def slow_task():
        while not worker.is_stopped():
            time.sleep(0.05)
        completed.append(1)

    worker.submit(slow_task)
    time.sleep(0.05)

    worker.shutdown(timeout=2.0)

    assert completed == [1]


def test_background_worker_multiple_threads():
    worker = BackgroundWorker(dispatcher=immediate)
    results = []
    lock = threading.Lock()

    def task(value):
        with lock:
            results.append(value)

    for value in (1, 2, 3):
        worker.submit(task, value)

    worker.shutdown(timeout=2.0)

    assert sorted(results) == [1, 2, 3]
