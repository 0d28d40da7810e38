"""Run callables in background threads and collect their outcomes."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """The outcome of a task: a value, or the exception it raised."""

    data: T | None = None
    error: BaseException | None = None

    def unwrap(self) -> T | None:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.data


class Task(Generic[T]):
    """A handle to a result that becomes available once, possibly later."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._result: Result[T] | None = None
        self._callbacks: list[Callable[[Result[T]], Any]] = []

    def _resolve(self, result: Result[T]) -> None:
        with self._lock:
            if self._result is not None:
                raise RuntimeError("task already resolved")
            self._result = result
            callbacks, self._callbacks = self._callbacks, []
        self._event.set()
        for callback in callbacks:
            callback(result)

    def _on_done(self, callback: Callable[[Result[T]], Any]) -> None:
        with self._lock:
            result = self._result
            if result is None:
                self._callbacks.append(callback)
                return
        callback(result)

    def wait(self) -> Result[T]:
        """Block until the task finishes and return its result."""
        self._event.wait()
        assert self._result is not None
        return self._result

    def done(self) -> bool:
        """Return True once the result is available."""
        return self._event.is_set()


def run(fn: Callable[[], T]) -> Task[T]:
    """Call ``fn`` in a background thread; exceptions become the task's error."""
    task: Task[T] = Task()

    def worker() -> None:
        try:
            value = fn()
        except BaseException as exc:  # noqa: BLE001 - captured into the result
            task._resolve(Result(error=exc))
        else:
            task._resolve(Result(data=value))

    threading.Thread(target=worker, daemon=True).start()
    return task


def ready(value: T | None = None, error: BaseException | None = None) -> Task[T]:
    """Return a task that has already finished with the given outcome."""
    task: Task[T] = Task()
    task._resolve(Result(data=value, error=error))
    return task


def wait(task: Task[T]) -> T | None:
    """Wait for one task and return its value, raising its error if any."""
    return task.wait().unwrap()


def wait_all(*tasks: Task[Any]) -> list[Any]:
    """Wait for every task and return their values in argument order.

    All tasks are waited for even when some fail; the error of the task
    that finished first among the failing ones is then raised.
    """
    finished: queue.Queue[tuple[int, Result[Any]]] = queue.Queue()
    for index, task in enumerate(tasks):
        task._on_done(lambda result, i=index: finished.put((i, result)))

    results: list[Any] = [None] * len(tasks)
    first_error: BaseException | None = None
    for _ in tasks:
        index, result = finished.get()
        if first_error is None:
            first_error = result.error
        results[index] = result.data
    if first_error is not None:
        raise first_error
    return results