"""A price level in an order book."""

from __future__ import annotations

import functools
import threading
from typing import List

from raptoroms.order import Order


@functools.total_ordering
class PricePoint:
    """All resting orders at one price, ordered and compared by price."""

    def __init__(self, price: float) -> None:
        self.price = price
        self.volume = 0
        self.size = 0
        self.orders: List[Order] = []
        self._lock = threading.Lock()

    def add_order(self, order: Order) -> None:
        """Rest ``order`` at this level, growing its size and volume."""
        with self._lock:
            self.size += order.quantity
            self.volume += order.quantity
            self.orders.append(order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PricePoint):
            return NotImplemented
        return self.price == other.price

    def __lt__(self, other: "PricePoint") -> bool:
        if not isinstance(other, PricePoint):
            return NotImplemented
        return self.price < other.price

    def __hash__(self) -> int:
        return hash(self.price)

    def __repr__(self) -> str:
        return f"PricePoint(price={self.price!r}, size={self.size}, orders={len(self.orders)})"

    def __str__(self) -> str:
        return str(self.price)