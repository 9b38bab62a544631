"""Execution reports."""

from __future__ import annotations

from dataclasses import dataclass

from raptoroms.enums import ExecutionType, OrderSide, OrderStatus


@dataclass(frozen=True)
class Execution:
    """A fill or status report for one order."""

    order_id: str
    exec_id: str
    exec_type: ExecutionType
    ord_status: OrderStatus
    symbol: str
    side: OrderSide
    leaves_qty: int
    cum_qty: int
    avg_px: float