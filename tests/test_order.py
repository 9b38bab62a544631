from raptoroms.enums import LiquidityIndicator, OrderSide, OrderStatus, OrderType, TimeInForce
from raptoroms.order import Order


def _order(quantity=150000):
    return Order(OrderSide.BUY, "GOOG", quantity, OrderType.LIMIT, 1200.99, TimeInForce.DAY)


def test_new_order_defaults():
    order = _order()
    assert order.min_quantity == order.quantity
    assert order.cumulative_quantity == 0
    assert order.order_status is OrderStatus.NEW
    assert order.leaves() == order.quantity


def test_leaves_tracks_cumulative():
    order = _order(1000)
    order.cumulative_quantity = 400
    assert order.leaves() == 600
    assert not order.is_terminal()


def test_terminal_when_fully_filled():
    order = _order(1000)
    order.cumulative_quantity = 1000
    assert order.is_terminal()


def test_liquidity_indicator_given():
    order = Order(OrderSide.SELL, "JPM", 10, OrderType.LIMIT, 110, TimeInForce.DAY, LiquidityIndicator.REMOVE)
    assert order.liquidity_indicator is LiquidityIndicator.REMOVE


def test_copy_keeps_terms_and_fill():
    parent = _order(1000)
    parent.cumulative_quantity = 200
    parent.order_status = OrderStatus.PARTIAL
    parent.cl_ord_id = "parent-1"
    child = parent.copy()
    assert (child.side, child.symbol, child.quantity, child.order_type, child.price) == (
        parent.side,
        parent.symbol,
        parent.quantity,
        parent.order_type,
        parent.price,
    )
    assert child.cumulative_quantity == parent.cumulative_quantity
    assert child.order_status is OrderStatus.NEW
    assert child.cl_ord_id == ""
    assert child.min_quantity == parent.quantity


def test_copy_is_independent():
    parent = _order(1000)
    child = parent.copy()
    child.quantity = 5
    assert parent.quantity == 1000
    assert child.lock is not parent.lock
    assert child is not parent