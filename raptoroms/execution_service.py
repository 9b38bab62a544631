"""Fills matched orders and reports the resulting executions."""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Callable, Dict, Optional

from raptoroms.enums import ExecutionType, OrderStatus, OrderType
from raptoroms.execution import Execution
from raptoroms.order import Order

log = logging.getLogger(__name__)

ExecutionListener = Callable[[Execution], None]


class ExecutionService:
    """Fills pairs of matched orders and hands execution reports to a listener."""

    def __init__(self, listener: Optional[ExecutionListener] = None) -> None:
        self._listener = listener
        self._exec_ids = itertools.count()
        self._lock = threading.Lock()

    def cancel(self, order: Order) -> None:
        """Cancel ``order``: nothing more of it can be filled."""
        with order.lock:
            order.quantity = 0
            order.order_status = OrderStatus.CANCELLED

    def execute(self, order: Order, from_book: Order, fill_table: Dict[str, float]) -> int:
        """Fill ``order`` against the resting ``from_book`` order; return the shares executed.

        The caller is expected to hold the resting order's lock.
        """
        if from_book.is_terminal() or order.is_terminal():
            return 0
        executed = min(order.quantity, from_book.quantity)
        order.quantity -= executed
        order.cumulative_quantity += executed
        from_book.quantity -= executed
        from_book.cumulative_quantity += executed
        if executed:
            self._report_execution(order, from_book, fill_table)
        return executed

    def _report_execution(self, order: Order, from_book: Order, fill_table: Dict[str, float]) -> None:
        avg_px = self._resolve_px(order, from_book, fill_table)
        self._build_exec(order, avg_px)
        self._build_exec(from_book, avg_px)

    @staticmethod
    def _resolve_px(order: Order, from_book: Order, fill_table: Dict[str, float]) -> float:
        if order.order_type is OrderType.MARKET:
            if from_book.order_type is OrderType.MARKET:
                return fill_table.get(order.symbol, 0.0)
            return from_book.price
        if from_book.order_type is OrderType.MARKET:
            return order.price
        return from_book.price

    def _build_exec(self, order: Order, avg_px: float) -> None:
        if order.is_terminal():
            exec_type, ord_status = ExecutionType.DONE, OrderStatus.FILLED
        else:
            exec_type, ord_status = ExecutionType.TRADE, OrderStatus.PARTIAL
        with self._lock:
            execution = Execution(
                order_id=order.cl_ord_id,
                exec_id=str(next(self._exec_ids)),
                exec_type=exec_type,
                ord_status=ord_status,
                symbol=order.symbol,
                side=order.side,
                leaves_qty=order.leaves(),
                cum_qty=order.cumulative_quantity,
                avg_px=avg_px,
            )
        log.info("Execution Report: S %s C %d", order.symbol, order.cumulative_quantity)
        if self._listener is not None:
            self._listener(execution)