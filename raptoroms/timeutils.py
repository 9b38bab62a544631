"""Clock helpers."""

from __future__ import annotations

import time


def cur_time_epoch() -> int:
    """Whole seconds since the Unix epoch."""
    return int(time.time())


def seconds_since_midnight() -> int:
    """Whole seconds elapsed since local midnight."""
    now = time.time()
    local = time.localtime(now)
    midnight = time.mktime((local.tm_year, local.tm_mon, local.tm_mday, 0, 0, 0, 0, 0, -1))
    return int(now - midnight)