"""Order and algorithm configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from raptoroms.order import Order
from raptoroms.routing_config import RoutingConfig


@dataclass(kw_only=True)
class OrderConfig:
    """An order together with how it is routed."""

    routing_config: RoutingConfig
    order: Optional[Order] = None


@dataclass(kw_only=True)
class AlgoConfig(OrderConfig):
    """Configuration common to all algorithms: the active window in epoch seconds."""

    start_time: int
    end_time: int


@dataclass(kw_only=True)
class TimingContext(AlgoConfig):
    """Configuration for algorithms that send slices at intervals (seconds)."""

    initial_delay: int
    interval: int


@dataclass(kw_only=True)
class TWAPConfig(TimingContext):
    """TWAP configuration: historic prices per second of the day."""

    hist_price: List[float] = field(default_factory=list)


@dataclass(kw_only=True)
class VWAPConfig(TimingContext):
    """VWAP configuration: historic volumes and prices per second of the day."""

    hist_volume: List[int] = field(default_factory=list)
    hist_price: List[float] = field(default_factory=list)


@dataclass(kw_only=True)
class ParticipateConfig(TimingContext):
    """Participation configuration: historic volumes and target participation rate."""

    hist_volume: List[int] = field(default_factory=list)
    participation: float


@dataclass(kw_only=True)
class IcebergConfig(AlgoConfig):
    """Iceberg configuration: displayed size and its random variance."""

    iceberg_display: int
    display_variance: float = -1