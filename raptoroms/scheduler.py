"""A single-threaded scheduler that runs callables at given times."""

from __future__ import annotations

import heapq
import itertools
import threading
import time
from concurrent.futures import Future
from datetime import timedelta
from typing import Any, Callable, List, Tuple, Union

Delay = Union[float, timedelta]


class AlgorithmScheduler:
    """Runs scheduled callables in time order on one background thread.

    Times are ``time.monotonic()`` values; every call returns a Future.
    """

    def __init__(self) -> None:
        self._tasks: List[Tuple[float, int, Future, Callable[[], Any]]] = []
        self._counter = itertools.count()
        self._cv = threading.Condition()
        self._exit = False
        self._thread = threading.Thread(target=self._run, name="algorithm-scheduler", daemon=True)
        self._thread.start()

    def __enter__(self) -> "AlgorithmScheduler":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _run(self) -> None:
        with self._cv:
            while not self._exit:
                if not self._tasks:
                    self._cv.wait()
                    continue
                delay = self._tasks[0][0] - time.monotonic()
                if delay > 0:
                    self._cv.wait(delay)
                    continue
                _, _, future, call = heapq.heappop(self._tasks)
                self._cv.release()
                try:
                    self._invoke(future, call)
                finally:
                    self._cv.acquire()

    @staticmethod
    def _invoke(future: Future, call: Callable[[], Any]) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = call()
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    def schedule(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run ``func`` as soon as possible."""
        return self.schedule_at(time.monotonic(), func, *args, **kwargs)

    def schedule_after(self, delay: Delay, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run ``func`` after ``delay`` seconds (or a timedelta)."""
        seconds = delay.total_seconds() if isinstance(delay, timedelta) else float(delay)
        return self.schedule_at(time.monotonic() + seconds, func, *args, **kwargs)

    def schedule_at(self, when: float, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run ``func`` at the monotonic time ``when``."""
        future: Future = Future()
        with self._cv:
            if self._exit:
                raise RuntimeError("scheduler is closed")
            heapq.heappush(self._tasks, (when, next(self._counter), future, lambda: func(*args, **kwargs)))
            self._cv.notify()
        return future

    def _drop_pending(self) -> None:
        for _, _, future, _ in self._tasks:
            future.cancel()
        self._tasks.clear()

    def clear(self) -> None:
        """Drop every pending task, cancelling its future."""
        with self._cv:
            self._drop_pending()

    def close(self) -> None:
        """Stop the worker thread; pending tasks are cancelled."""
        with self._cv:
            self._exit = True
            self._drop_pending()
            self._cv.notify()
        if threading.current_thread() is not self._thread:
            self._thread.join()