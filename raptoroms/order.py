"""Orders and their FIX fields."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from raptoroms.enums import LiquidityIndicator, OrderSide, OrderStatus, OrderType, TimeInForce


@dataclass(eq=False)
class Order:
    """A single order, with the quantities tracked while it is worked."""

    side: OrderSide = OrderSide.BUY
    symbol: str = ""
    quantity: int = 0
    order_type: OrderType = OrderType.MARKET
    price: float = 0.0
    time_in_force: TimeInForce = TimeInForce.DAY
    liquidity_indicator: LiquidityIndicator = LiquidityIndicator.ADD
    min_quantity: Optional[int] = None
    cumulative_quantity: int = 0
    order_status: OrderStatus = OrderStatus.NEW
    account: str = ""
    cl_ord_id: str = ""
    msg_type: str = ""
    text: str = ""
    transact_time: str = ""
    trade_date: str = ""
    ex_destination: str = ""
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        if self.min_quantity is None:
            self.min_quantity = self.quantity

    def leaves(self) -> int:
        """Quantity still open."""
        return self.quantity - self.cumulative_quantity

    def is_terminal(self) -> bool:
        """True once nothing is left to fill."""
        return self.leaves() == 0

    def copy(self) -> "Order":
        """A child order: same terms and fill so far, fresh status and identifiers."""
        return Order(
            side=self.side,
            symbol=self.symbol,
            quantity=self.quantity,
            order_type=self.order_type,
            price=self.price,
            time_in_force=self.time_in_force,
            liquidity_indicator=self.liquidity_indicator,
            min_quantity=self.quantity,
            cumulative_quantity=self.cumulative_quantity,
            order_status=OrderStatus.NEW,
        )