"""
Delayed callbacks that can be cancelled before they run

Tasks are grouped by an owner (the view that started them) so a view can
cancel its pending work when the user navigates away.
"""
import threading
from typing import Any, Callable, Dict, Hashable, List, Optional


class TaskCancelled(Exception):
    """Raised by ScheduledTask.result() when the task was cancelled"""


class ScheduledTask:
    """Runs callback once on a timer thread after delay seconds"""

    def __init__(self, delay: float, callback: Callable[[], Any], owner: Hashable = None):
        self.delay = delay
        self.callback = callback
        self.owner = owner
        self._lock = threading.Lock()
        self._finished = threading.Event()
        self._started = False
        self._cancelled = False
        self._result = None
        self._error: Optional[BaseException] = None
        self._timer = threading.Timer(delay, self._run)
        self._timer.daemon = True

    def start(self) -> 'ScheduledTask':
        self._timer.start()
        return self

    def _run(self):
        with self._lock:
            if self._cancelled:
                return
            self._started = True
        try:
            self._result = self.callback()
        except BaseException as e:
            self._error = e
        finally:
            self._finished.set()

    def cancel(self) -> bool:
        """Cancel the task. Returns False if the callback already started."""
        with self._lock:
            if self._started:
                return False
            self._cancelled = True
        self._timer.cancel()
        self._finished.set()
        return True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._finished.is_set()

    def result(self, timeout: Optional[float] = None):
        """
        Wait for the callback and return its value

        Raises:
            TaskCancelled: the task was cancelled before it ran
            TimeoutError: the task did not finish within timeout
            Any exception raised by the callback
        """
        if not self._finished.wait(timeout):
            raise TimeoutError(f"Task did not finish within {timeout} seconds")
        if self._cancelled:
            raise TaskCancelled()
        if self._error is not None:
            raise self._error
        return self._result


class TaskRegistry:
    """Tracks scheduled tasks per owner"""

    def __init__(self):
        self._lock = threading.Lock()
        self._tasks: Dict[Hashable, List[ScheduledTask]] = {}

    def schedule(self, owner: Hashable, delay: float, callback: Callable[[], Any]) -> ScheduledTask:
        task = ScheduledTask(delay, callback, owner=owner)
        with self._lock:
            self._prune()
            self._tasks.setdefault(owner, []).append(task)
        return task.start()

    def _prune(self):
        for owner in list(self._tasks):
            self._tasks[owner] = [task for task in self._tasks[owner] if not task.done]
            if not self._tasks[owner]:
                del self._tasks[owner]

    def pending(self, owner: Hashable = None) -> List[ScheduledTask]:
        with self._lock:
            self._prune()
            if owner is None:
                return [task for tasks in self._tasks.values() for task in tasks]
            return list(self._tasks.get(owner, []))

    def cancel_owner(self, owner: Hashable) -> int:
        """Cancel every pending task of owner; returns how many were stopped"""
        with self._lock:
            tasks = self._tasks.pop(owner, [])
        return sum(1 for task in tasks if task.cancel())

    def cancel_all(self) -> int:
        with self._lock:
            tasks = [task for tasks in self._tasks.values() for task in tasks]
            self._tasks.clear()
        return sum(1 for task in tasks if task.cancel())
