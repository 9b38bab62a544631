"""Trading algorithms that slice a parent order into child orders."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Type, TypeVar

from raptoroms.antigaming import randomize
from raptoroms.configs import AlgoConfig
from raptoroms.enums import AlgorithmType, OrderSide, OrderType
from raptoroms.order import Order
from raptoroms.raptor import Raptor
from raptoroms.timeutils import cur_time_epoch, seconds_since_midnight

log = logging.getLogger(__name__)

N = TypeVar("N", int, float)


def _window(history: Sequence[N], interval: int) -> List[N]:
    """The history values for the coming interval, starting at the current second of the day."""
    start = seconds_since_midnight()
    window = list(history[start:start + interval])
    if len(window) != interval:
        raise IndexError(f"history does not cover seconds {start}..{start + interval - 1}")
    return window


def _px_incompatible_with_limit(px: float, order: Order) -> bool:
    limit = order.price
    return px <= limit if order.side is OrderSide.BUY else px >= limit


class Algorithm(ABC):
    """Base class for all trading algorithms."""

    def __init__(self, config: AlgoConfig, raptor: Raptor) -> None:
        self.config = config
        self.raptor = raptor
        self.shares_traded = 0
        self.cancelled = False
        self._guard = threading.Condition()

    @abstractmethod
    def execute(self):
        """Start working the parent order."""

    @abstractmethod
    def price(self) -> float:
        """Price for the next child order."""

    @abstractmethod
    def leaves_quantity(self) -> int:
        """Quantity for the next child order."""

    def cancel(self) -> None:
        """Stop the algorithm, waking it if it is waiting."""
        with self._guard:
            self.cancelled = True
            self._guard.notify_all()

    def is_active(self) -> bool:
        """True while within the end time and shares remain to be traded."""
        return (
            cur_time_epoch() <= self.config.end_time
            and self.shares_traded < self.config.order.quantity
        )

    def send_to_router(self) -> None:
        """Send the next child order."""
        child = self._child_order()
        self.raptor.send(self.config.routing_config, child)
        self.shares_traded += child.quantity

    def _child_order(self) -> Order:
        parent = self.config.order
        child = parent.copy()
        px = self.price()
        if parent.order_type is OrderType.LIMIT and _px_incompatible_with_limit(px, parent):
            px = parent.price
        child.price = px
        child.quantity = self.leaves_quantity()
        return child

    def _wait_unless_cancelled(self, seconds: float) -> bool:
        with self._guard:
            return self._guard.wait_for(lambda: self.cancelled, seconds)


class TimedAlgorithm(Algorithm):
    """Sends equal slices at (randomly stretched) intervals on a background thread."""

    def __init__(self, config: AlgoConfig, raptor: Raptor) -> None:
        super().__init__(config, raptor)
        self._leaves_quantity: Optional[int] = None

    def execute(self) -> threading.Thread:
        """Start the slicing loop; return the thread running it."""
        thread = threading.Thread(target=self._run, name=type(self).__name__, daemon=True)
        thread.start()
        return thread

    def _run(self) -> None:
        log.info("========= Booting algorithm ========= ")
        context = self.config
        sleep = max(0, context.start_time - cur_time_epoch()) + context.initial_delay
        if sleep:
            self._wait_unless_cancelled(sleep)
        while not self.cancelled:
            log.info("--- Algorithm active ... sending to router  ---")
            self.send_to_router()
            if not self.is_active():
                break
            self._wait_unless_cancelled(context.interval + randomize(0, 2))
        log.info(
            "Algorithm executed! %d/%d shares traded.",
            self.shares_traded, self.config.order.quantity,
        )

    def leaves_quantity(self) -> int:
        """The parent quantity divided evenly over the interval."""
        if self._leaves_quantity is None:
            self._leaves_quantity = self.config.order.quantity // self.config.interval
        return self._leaves_quantity


class TWAPAlgorithm(TimedAlgorithm):
    """Time-weighted average price."""

    def price(self) -> float:
        """Mean historic price over the coming interval."""
        window = _window(self.config.hist_price, self.config.interval)
        return sum(window) / len(window)


class VWAPAlgorithm(TimedAlgorithm):
    """Volume-weighted average price."""

    def price(self) -> float:
        """Historic volume-weighted figure over the coming interval, capped at the order price."""
        interval = self.config.interval
        volumes = _window(self.config.hist_volume, interval)
        prices = _window(self.config.hist_price, interval)
        numerator = sum(v * p for v, p in zip(volumes, prices))
        denominator = sum(prices)
        return min(self.config.order.price, numerator / denominator)


class ParticipateAlgorithm(TimedAlgorithm):
    """Trades a fixed share of the expected market volume."""

    def leaves_quantity(self) -> int:
        """Participation rate times historic volume over the coming interval, capped by what remains."""
        total_volume = sum(_window(self.config.hist_volume, self.config.interval))
        log.info("Total volume %d", total_volume)
        return min(
            self.config.order.quantity - self.shares_traded,
            int(total_volume * self.config.participation),
        )

    def price(self) -> float:
        """The parent order's price."""
        return self.config.order.price


class IcebergAlgorithm(Algorithm):
    """Shows only part of the order at a time, optionally with randomised display size."""

    def __init__(self, config: AlgoConfig, raptor: Raptor) -> None:
        super().__init__(config, raptor)
        self.upper = -1
        self.lower = -1

    def execute(self) -> None:
        """Set the display bounds and send the first display."""
        self._init_bounds()
        self.trigger_next_display()

    def _init_bounds(self) -> None:
        display = self.config.iceberg_display
        variance = self.config.display_variance
        if variance > 0:
            delta = int(variance * display)
            self.upper = display + delta
            self.lower = display - delta

    def trigger_next_display(self) -> None:
        """Send the next display if the algorithm is still active."""
        if self.is_active():
            self.send_to_router()

    def price(self) -> float:
        """The parent order's price."""
        return self.config.order.price

    def leaves_quantity(self) -> int:
        """Display size (randomised within the bounds if there is variance), capped by what remains."""
        if self.config.display_variance > 0:
            display = randomize(self.lower, self.upper)
        else:
            display = self.config.iceberg_display
        return min(display, self.config.order.quantity - self.shares_traded)


_ALGORITHMS: Dict[AlgorithmType, Type[Algorithm]] = {
    AlgorithmType.ICEBERG: IcebergAlgorithm,
    AlgorithmType.VWAP: VWAPAlgorithm,
    AlgorithmType.PARTICIPATE: ParticipateAlgorithm,
    AlgorithmType.TWAP: TWAPAlgorithm,
}


def create_algorithm(algorithm_type: AlgorithmType, raptor: Raptor, config: AlgoConfig) -> Algorithm:
    """Build the algorithm of ``algorithm_type`` for ``config``."""
    try:
        cls = _ALGORITHMS[algorithm_type]
    except KeyError:
        raise ValueError("Algorithm must be defined!") from None
    return cls(config, raptor)