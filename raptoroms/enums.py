"""Enumerations shared across the order management system."""

from __future__ import annotations

from enum import Enum


class AlgorithmType(Enum):
    """Trading algorithm that works an order."""

    VWAP = 0
    TWAP = 1
    ICEBERG = 2
    PARTICIPATE = 3
    NONE = 4


class BasketServerStatus(Enum):
    """Whether a basket server accepts work."""

    ACTIVE = 0
    INACTIVE = 1


class ExecutionType(str, Enum):
    """FIX ExecType codes."""

    NEW = "0"
    DONE = "3"
    CANCELLED = "4"
    TRADE = "F"
    REJECTED = "8"
    EXPIRED = "C"


class LiquidityIndicator(str, Enum):
    """Whether an order adds liquidity, removes it, or both."""

    ADD = "A"
    REMOVE = "R"
    BOTH = "B"


class LotSizing(Enum):
    """Whether wave quantities are rounded to round lots."""

    ROUND = 0
    ODD = 1


class OrderSide(str, Enum):
    """FIX Side codes."""

    BUY = "0"
    SELL = "1"


class OrderStatus(str, Enum):
    """FIX OrdStatus codes."""

    NEW = "0"
    PARTIAL = "1"
    FILLED = "2"
    CANCELLED = "4"
    REJECTED = "8"
    EXPIRE = "C"


class OrderType(str, Enum):
    """FIX OrdType codes."""

    MARKET = "1"
    LIMIT = "2"


class Rounding(Enum):
    """Direction in which round-lot quantities are rounded."""

    UP = 0
    DOWN = 1


class RoutingType(Enum):
    """How an order is routed to venues."""

    DIRECT = 1
    SPRAY = 2
    SERIAL = 3


class TimeInForce(str, Enum):
    """FIX TimeInForce codes."""

    DAY = "0"
    GTC = "1"
    OPG = "2"
    IOC = "3"
    FOK = "5"