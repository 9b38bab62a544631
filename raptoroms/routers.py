"""Order routers that split orders across venues."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from raptoroms.latch import CountDownLatch
from raptoroms.order import Order
from raptoroms.order_book import OrderBook
from raptoroms.venue import Venue
from raptoroms.venue_manager import VenueManager
from raptoroms.venue_order_manager import VenueOrderManager

log = logging.getLogger(__name__)


class OrderRouter(ABC):
    """Sends orders on towards venues."""

    def __init__(self) -> None:
        self.cancelled = False

    @abstractmethod
    def route(self, order: Order) -> int:
        """Route ``order``; return the number of shares routed."""

    def cancel(self) -> None:
        """Stop routing any further orders."""
        self.cancelled = True


def latency_adjustments(venues: Sequence[Venue]) -> List[int]:
    """Per venue, the milliseconds to wait so that every venue receives its order together."""
    slowest = max((venue.avg_latency for venue in venues), default=0)
    slowest = max(slowest, 0)
    return [slowest - venue.avg_latency for venue in venues]


class SprayRouter(OrderRouter):
    """Splits an order across all venues for its symbol in proportion to their rank."""

    def __init__(self, venue_manager: VenueManager) -> None:
        super().__init__()
        self.venue_manager = venue_manager

    def route(self, order: Order) -> int:
        """Spray child orders to the venues and wait until every venue has received its child."""
        log.debug("-------------- BEGIN ROUTING ------------------- ")
        if order.is_terminal():
            log.error("Order is terminal!")
            return 0
        leaves = order.leaves()
        log.info("leavesQty: %d", leaves)
        venues = self.venue_manager.venues(order.symbol)
        if not venues:
            log.error("No venues for symbol: %s", order.symbol)
            return 0

        dispatches: List[Tuple[Venue, Order, int]] = []
        routed = 0
        for venue, adjustment in zip(venues, latency_adjustments(venues)):
            if routed >= order.quantity or self.cancelled:
                break
            probability = venue.execution_probability
            child_quantity = min(order.quantity - routed, int(leaves * probability))
            routed += child_quantity
            child = order.copy()
            child.quantity = child_quantity
            dispatches.append((venue, child, adjustment))
            log.info(
                "v: %s, prob:%s, child_qty: %d, price: %s",
                venue, probability, child_quantity, order.price,
            )
        if self.cancelled:
            return 0

        latch = CountDownLatch(len(dispatches))
        for venue, child, adjustment in dispatches:
            threading.Thread(
                target=self._deliver, args=(venue, child, adjustment, latch), daemon=True
            ).start()
        latch.wait()
        log.debug("-------------- DONE ROUTING ------------------- ")
        return routed

    @staticmethod
    def _deliver(venue: Venue, child: Order, adjustment_ms: int, latch: CountDownLatch) -> None:
        try:
            if adjustment_ms:
                time.sleep(adjustment_ms / 1000)
            venue.accept_order(child)
        finally:
            latch.count_down()


class ScrapingRouter(OrderRouter):
    """Hands each order straight to a liquidity aggregator."""

    def __init__(self, order_book: OrderBook, order_manager: Optional[VenueOrderManager] = None) -> None:
        super().__init__()
        self.order_book = order_book
        self.order_manager = order_manager or VenueOrderManager()

    def route(self, order: Order) -> int:
        """Let the aggregator work ``order``; return what is still open."""
        self.order_manager.accept_order(order)
        return order.leaves()