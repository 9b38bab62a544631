import pytest

from raptoroms.enums import (
    AlgorithmType,
    BasketServerStatus,
    ExecutionType,
    LiquidityIndicator,
    LotSizing,
    OrderSide,
    OrderStatus,
    OrderType,
    Rounding,
    RoutingType,
    TimeInForce,
)


def test_fix_side_codes():
    assert OrderSide("0") is OrderSide.BUY
    assert OrderSide("1") is OrderSide.SELL


def test_exec_type_trade_code():
    assert ExecutionType.TRADE.value == "F"
    assert ExecutionType("C") is ExecutionType.EXPIRED


@pytest.mark.parametrize(
    "enum_cls",
    [ExecutionType, LiquidityIndicator, OrderSide, OrderStatus, OrderType, TimeInForce, RoutingType],
)
def test_round_trip_by_value(enum_cls):
    for member in enum_cls:
        assert enum_cls(member.value) is member


def test_unknown_code_rejected():
    with pytest.raises(ValueError):
        OrderType("9")


def test_routing_type_values():
    assert RoutingType(1) is RoutingType.DIRECT
    assert RoutingType(2) is RoutingType.SPRAY
    assert RoutingType(3) is RoutingType.SERIAL


@pytest.mark.parametrize(
    "enum_cls, names",
    [
        (AlgorithmType, ["VWAP", "TWAP", "ICEBERG", "PARTICIPATE", "NONE"]),
        (LotSizing, ["ROUND", "ODD"]),
        (Rounding, ["UP", "DOWN"]),
        (BasketServerStatus, ["ACTIVE", "INACTIVE"]),
    ],
)
def test_member_sets(enum_cls, names):
    members = [enum_cls(m.value) for m in enum_cls]
    assert [m.name for m in members] == names


@pytest.mark.parametrize("enum_cls", [ExecutionType, OrderStatus, TimeInForce, LiquidityIndicator])
def test_codes_are_unique(enum_cls):
    resolved = [enum_cls(m.value) for m in enum_cls]
    assert len(set(resolved)) == len(resolved) == len(list(enum_cls))