"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import logging
import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ThreadPool:
    """Runs submitted calls on ``num_threads`` worker threads.

    On shutdown the workers stop; tasks still waiting in the queue are cancelled.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError(f"need at least one thread, got {num_threads}")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple]] = deque()
        self._condition = threading.Condition()
        self._stopping = False
        self._workers = [
            threading.Thread(target=self._work, daemon=True) for _ in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._tasks or self._stopping)
                if self._stopping:
                    return
                future, fn, args = self._tasks.popleft()
                logger.debug("Size of queue: %d", len(self._tasks))
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def submit(self, fn: Callable[..., Any], *args: Any) -> Future:
        """Queue ``fn(*args)`` and return a future for its result."""
        future: Future = Future()
        with self._condition:
            if self._stopping:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            self._tasks.append((future, fn, args))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop the workers, cancel queued tasks and wait for running ones to end."""
        with self._condition:
            self._stopping = True
            pending = list(self._tasks)
            self._tasks.clear()
            self._condition.notify_all()
        for future, _, _ in pending:
            future.cancel()
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()