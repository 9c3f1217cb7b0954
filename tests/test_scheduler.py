import threading

import pytest

from services.scheduler import ScheduledTask, TaskCancelled, TaskRegistry


def test_task_runs_callback_and_returns_value():
    task = ScheduledTask(0.01, lambda: 42).start()
    assert task.result(timeout=5) == 42
    assert task.done and not task.cancelled


def test_cancelled_task_never_runs():
    calls = []
    task = ScheduledTask(10, lambda: calls.append(1)).start()

    assert task.cancel()

    with pytest.raises(TaskCancelled):
        task.result(timeout=1)
    assert calls == []


def test_cancel_after_start_fails():
    started = threading.Event()
    release = threading.Event()

    def work():
        started.set()
        release.wait(5)
        return "done"

    task = ScheduledTask(0, work).start()
    assert started.wait(5)
    assert not task.cancel()
    release.set()
    assert task.result(timeout=5) == "done"


def test_callback_errors_are_raised_by_result():
    def fail():
        raise OSError("quota exceeded")

    task = ScheduledTask(0, fail).start()
    with pytest.raises(OSError):
        task.result(timeout=5)


def test_result_timeout():
    task = ScheduledTask(10, lambda: None).start()
    with pytest.raises(TimeoutError):
        task.result(timeout=0.01)
    task.cancel()


def test_registry_cancels_only_the_owner_tasks():
    registry = TaskRegistry()
    calls = []
    registry.schedule("report", 10, lambda: calls.append("report"))
    registry.schedule("report", 10, lambda: calls.append("report"))
    other = registry.schedule("admin", 0, lambda: calls.append("admin"))

    assert registry.cancel_owner("report") == 2
    other.result(timeout=5)

    assert calls == ["admin"]
    assert registry.pending("report") == []


def test_registry_cancel_all():
    registry = TaskRegistry()
    registry.schedule("a", 10, lambda: None)
    registry.schedule("b", 10, lambda: None)
    assert len(registry.pending()) == 2
    assert registry.cancel_all() == 2
    assert registry.pending() == []
