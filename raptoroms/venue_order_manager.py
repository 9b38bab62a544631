"""Matches incoming orders against a venue's order books."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, Optional

from raptoroms.enums import LiquidityIndicator, OrderSide, OrderType, TimeInForce
from raptoroms.execution_service import ExecutionService
from raptoroms.order import Order
from raptoroms.order_book import OrderBook
from raptoroms.price_point import PricePoint
from raptoroms.splay_tree import Node

Compatibility = Callable[[Order, PricePoint], bool]


def _compatible_buy(order: Order, level: PricePoint) -> bool:
    return order.price <= level.price


def _compatible_sell(order: Order, level: PricePoint) -> bool:
    return order.price >= level.price


class VenueOrderManager:
    """The interface through which a venue works its order books.

    Orders may add liquidity, remove it, or both.
    """

    def __init__(self, execution_service: Optional[ExecutionService] = None) -> None:
        self.execution_service = execution_service or ExecutionService()
        self.books: Dict[str, Dict[OrderSide, OrderBook]] = {}
        self.order_arena: Dict[str, Order] = {}
        self.fill_table: Dict[str, float] = {}

    def book(self, symbol: str, side: OrderSide) -> OrderBook:
        """The book for ``symbol`` and ``side``, created on first use."""
        return self.books.setdefault(symbol, {}).setdefault(side, OrderBook())

    def accept_order(self, order: Order) -> None:
        """Match ``order`` against the book if it takes liquidity, then rest what is left."""
        self.order_arena[order.cl_ord_id] = order
        book = self.book(order.symbol, order.side)
        indicator = order.liquidity_indicator
        removes = indicator is LiquidityIndicator.REMOVE
        if (removes or indicator is LiquidityIndicator.BOTH) and book.root is not None:
            compatible = _compatible_buy if order.side is OrderSide.BUY else _compatible_sell
            self._match(book.root, order, compatible)
        if not removes and not order.is_terminal():
            if order.time_in_force is TimeInForce.IOC and order.cumulative_quantity < order.min_quantity:
                self.execution_service.cancel(order)
            else:
                book.add_order(order)

    def _match(self, root: Node, order: Order, compatible: Compatibility) -> None:
        for level in self._matching_levels(root, order, compatible):
            if order.is_terminal():
                return
            for resting in list(level.orders):
                with resting.lock:
                    self.execution_service.execute(order, resting, self.fill_table)
                if order.is_terminal():
                    return

    @staticmethod
    def _matching_levels(root: Node, order: Order, compatible: Compatibility) -> Iterator[PricePoint]:
        """In-order walk that skips any subtree rooted at an incompatible level."""
        is_market = order.order_type is OrderType.MARKET
        stack = []
        node: Optional[Node] = root
        while True:
            while node is not None and (is_market or compatible(order, node.key)):
                stack.append(node)
                node = node.left
            if not stack:
                return
            node = stack.pop()
            yield node.key
            node = node.right