from raptoroms.enums import OrderSide, OrderType
from raptoroms.order import Order
from raptoroms.price_point import PricePoint


def _order(quantity, price=110.0):
    return Order(side=OrderSide.BUY, symbol="JPM", quantity=quantity, order_type=OrderType.LIMIT, price=price)


def test_new_price_point_is_empty():
    point = PricePoint(110.0)
    assert (point.size, point.volume, point.orders) == (0, 0, [])


def test_add_order_accumulates_quantities():
    point = PricePoint(110.0)
    first, second = _order(10), _order(15)
    point.add_order(first)
    point.add_order(second)
    assert point.size == first.quantity + second.quantity
    assert point.volume == point.size
    assert point.orders == [first, second]


def test_comparisons_use_price():
    low, high = PricePoint(90.5), PricePoint(1400.5)
    assert low < high
    assert high > low
    assert low <= PricePoint(90.5)
    assert high >= low
    assert low == PricePoint(90.5)
    assert low != high


def test_sorting_orders_by_price():
    points = [PricePoint(p) for p in (3.0, 1.0, 2.0)]
    assert [p.price for p in sorted(points)] == [1.0, 2.0, 3.0]