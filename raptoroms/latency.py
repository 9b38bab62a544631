"""Hourly latency estimates."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AvgLatency:
    """Historic and today's average latency per hour of the day."""

    hist_latency: List[int] = field(default_factory=list)
    today_latency: List[int] = field(default_factory=list)

    def latency_adjustment(self, hour: Optional[int] = None) -> int:
        """Blend historic and today's latency for ``hour`` (default: the current local hour)."""
        if hour is None:
            hour = time.localtime().tm_hour
        if not (0 <= hour < len(self.hist_latency) and hour < len(self.today_latency)):
            raise IndexError(f"no latency recorded for hour {hour}")
        return int(0.3 * self.hist_latency[hour] + 0.7 * self.today_latency[hour])