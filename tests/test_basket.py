import pytest

from raptoroms.basket import Basket
from raptoroms.enums import OrderSide


def _basket():
    return Basket(
        ["IBM", "JPM", "GOOG"],
        "ACCOUNT-1",
        7,
        [250000, 700000, 31250],
        [OrderSide.BUY, OrderSide.BUY, OrderSide.SELL],
    )


def test_leaves_is_total_quantity_before_trading():
    basket = _basket()
    assert basket.leaves() == sum(basket.quantities)


def test_leaves_drops_by_traded():
    basket = _basket()
    before = basket.leaves()
    basket.total_traded = 1000
    assert basket.leaves() == before - 1000


def test_update_routed_accumulates():
    basket = _basket()
    first = basket.update_routed(300)
    second = basket.update_routed(200)
    assert first == 300
    assert second == 500
    assert basket.routed == second


def test_new_wave_increments():
    basket = _basket()
    assert basket.current_wave_number == 0
    assert basket.new_wave() == 1
    assert basket.new_wave() == 2
    assert basket.current_wave_number == 2


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        Basket(["IBM", "JPM"], "ACCOUNT-1", 1, [100], [OrderSide.BUY, OrderSide.SELL])