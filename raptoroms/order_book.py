"""One side of a symbol's order book, kept in a splay tree of price points."""

from __future__ import annotations

from typing import Iterator, Optional

from raptoroms.order import Order
from raptoroms.price_point import PricePoint
from raptoroms.splay_tree import Node, insert


class OrderBook:
    """Price levels keyed by price; the most recently touched level sits at the root."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def add_order(self, order: Order) -> None:
        """Rest ``order`` at its price level, creating the level if needed."""
        self.root = insert(self.root, PricePoint(order.price))
        self.root.key.add_order(order)

    def price_points(self) -> Iterator[PricePoint]:
        """Yield the price levels in ascending price order."""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right