"""A count-down latch."""

from __future__ import annotations

import threading
from typing import Optional


class CountDownLatch:
    """Lets threads wait until a count reaches zero."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._count = count
        self._cond = threading.Condition()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the count is zero; False if ``timeout`` seconds pass first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout)

    def count_down(self) -> None:
        """Decrement the count, never below zero, waking waiters."""
        with self._cond:
            if self._count > 0:
                self._count -= 1
                self._cond.notify_all()

    def count(self) -> int:
        """The current count."""
        with self._cond:
            return self._count