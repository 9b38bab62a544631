"""One wave of a basket: a percentage of every symbol sent together."""

from __future__ import annotations

import dataclasses
import threading
import time
from enum import IntFlag
from typing import List, Optional, Sequence

from raptoroms.algorithms import Algorithm, create_algorithm
from raptoroms.basket import Basket
from raptoroms.configs import OrderConfig
from raptoroms.enums import AlgorithmType, LotSizing, OrderStatus, OrderType, Rounding, TimeInForce
from raptoroms.execution import Execution
from raptoroms.order import Order
from raptoroms.routing_config import RoutingConfig

ROUND_LOT = 100


class WaveStatus(IntFlag):
    """Status bits of a wave."""

    PENDING = 1
    SENT = 2
    EXECUTED = 4
    PARTIAL_EX = 8
    CANCELLED = 16


class BasketWave:
    """Splits a basket into one order per symbol and sends them, directly or through an algorithm."""

    def __init__(
        self,
        wave_number: int,
        percentage: float,
        order_config: Optional[OrderConfig],
        algorithm_type: AlgorithmType,
        prices: Sequence[float],
        order_types: Sequence[OrderType],
        raptor,
        rounding: Rounding,
        lot_sizing: LotSizing,
        routing_config: Optional[RoutingConfig] = None,
    ) -> None:
        self.wave_number = wave_number
        self.percentage = percentage
        self.order_config = order_config
        self.algorithm_type = algorithm_type
        self.prices = list(prices)
        self.order_types = list(order_types)
        self.raptor = raptor
        self.rounding = rounding
        self.lot_sizing = lot_sizing
        self.routing_config = routing_config
        self.status_flags = WaveStatus.PENDING
        self.orders: List[Order] = []
        self.algorithms: List[Algorithm] = []
        self.total = 0
        self.timestamp = int(time.time() * 1000)
        self._traded = 0
        self._lock = threading.Lock()

    @property
    def traded(self) -> int:
        """Shares executed in this wave so far."""
        with self._lock:
            return self._traded

    def quantity_after_lot_adjustment(self, basket: Basket, total_quantity: int) -> int:
        """This wave's share of ``total_quantity``, rounded to round lots unless odd lots are allowed."""
        quantity = total_quantity * self.percentage
        if self.lot_sizing is LotSizing.ODD:
            return int(quantity)
        with_round_lots = int(quantity / ROUND_LOT) * ROUND_LOT
        if self.rounding is Rounding.UP:
            remaining = basket.leaves() - with_round_lots
            with_round_lots += min(ROUND_LOT, remaining)
        return with_round_lots

    def _split_by_security(self, basket: Basket) -> List[Order]:
        count = len(basket.symbols)
        if len(self.prices) < count or len(self.order_types) < count:
            raise ValueError("a price and an order type are needed for every symbol")
        orders = []
        for symbol, side, quantity, order_type, price in zip(
            basket.symbols, basket.sides, basket.quantities, self.order_types, self.prices
        ):
            adjusted = self.quantity_after_lot_adjustment(basket, quantity)
            orders.append(
                Order(
                    side=side,
                    symbol=symbol,
                    quantity=adjusted,
                    order_type=order_type,
                    price=price,
                    time_in_force=TimeInForce.DAY,
                )
            )
            self.total += adjusted
        return orders

    def execute(self, basket: Basket) -> None:
        """Send this wave's orders, once, if the wave is still pending."""
        if not self.status_flags & WaveStatus.PENDING:
            return
        if self.order_config is None and self.routing_config is None:
            raise ValueError("a wave needs an order configuration or a routing configuration")
        self.orders = self._split_by_security(basket)
        for order in self.orders:
            self._dispatch(order)
        self.status_flags = (self.status_flags | WaveStatus.SENT) & ~WaveStatus.PENDING

    def _dispatch(self, order: Order) -> None:
        config = self.order_config
        if config is None:
            self.raptor.send(self.routing_config, order)
            return
        config.order = order
        if self.algorithm_type is AlgorithmType.NONE:
            self.raptor.send(config.routing_config, order)
        else:
            algorithm = create_algorithm(
                self.algorithm_type, self.raptor, dataclasses.replace(config, order=order)
            )
            self.algorithms.append(algorithm)
            algorithm.execute()

    def cancel(self) -> None:
        """Cancel open orders, or the running algorithms, and mark the wave cancelled."""
        if self.algorithm_type is AlgorithmType.NONE:
            for order in self.orders:
                if order.order_status in (OrderStatus.NEW, OrderStatus.PARTIAL):
                    order.order_status = OrderStatus.CANCELLED
        else:
            for algorithm in self.algorithms:
                algorithm.cancel()
        self.status_flags |= WaveStatus.CANCELLED

    def status(self) -> str:
        """A readable status."""
        flags = self.status_flags
        if flags & WaveStatus.SENT:
            return "Sent"
        if flags & WaveStatus.CANCELLED:
            text = "Cancelled"
            if flags & WaveStatus.PARTIAL_EX:
                text += "- Partial Execution"
            return text
        if flags & WaveStatus.EXECUTED:
            return "Executed"
        if flags & WaveStatus.PENDING:
            return "Pending"
        return "N/A"

    def _find_order(self, order_id: str) -> Order:
        for order in self.orders:
            if order.cl_ord_id == order_id:
                return order
        raise LookupError(f"no order {order_id!r} in wave {self.wave_number}")

    def on_execution(self, execution: Execution) -> None:
        """Account for an execution report on one of this wave's orders."""
        order = self._find_order(execution.order_id)
        executed = order.quantity - execution.leaves_qty
        with self._lock:
            self._traded += executed
            if self.status_flags & WaveStatus.SENT:
                self.status_flags = (self.status_flags | WaveStatus.SENT) & ~WaveStatus.PARTIAL_EX
            elif self._traded == self.total:
                self.status_flags |= WaveStatus.EXECUTED

    def orders_with_status(self, status: OrderStatus) -> List[Order]:
        """This wave's orders whose status is ``status``."""
        return [order for order in self.orders if order.order_status is status]