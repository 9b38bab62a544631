from raptoroms.basket import Basket
from raptoroms.basket_store import BasketStore
from raptoroms.basket_wave import BasketWave
from raptoroms.enums import AlgorithmType, LotSizing, OrderSide, OrderType, Rounding


def _basket(basket_id):
    return Basket(["IBM"], "ACCOUNT-1", basket_id, [100], [OrderSide.BUY])


def _wave(number):
    return BasketWave(number, 0.5, None, AlgorithmType.NONE, [1.0], [OrderType.LIMIT],
                      None, Rounding.UP, LotSizing.ROUND)


def test_add_and_get_basket():
    store = BasketStore()
    basket = _basket(3)
    store.add_basket(basket)
    assert store.get_basket(3) is basket


def test_missing_basket_is_none():
    assert BasketStore().get_basket(42) is None


def test_waves_kept_in_order_per_basket():
    store = BasketStore()
    first, second, other = _wave(1), _wave(2), _wave(1)
    store.add_wave(1, first)
    store.add_wave(1, second)
    store.add_wave(2, other)
    assert store.waves(1) == [first, second]
    assert store.waves(2) == [other]


def test_waves_of_unknown_basket_is_empty():
    assert BasketStore().waves(9) == []


def test_delete_basket_by_object_and_id():
    store = BasketStore()
    a, b = _basket(1), _basket(2)
    store.add_basket(a)
    store.add_basket(b)
    store.delete_basket(a)
    store.delete_basket(2)
    assert store.get_basket(1) is None
    assert store.get_basket(2) is None


def test_delete_missing_basket_leaves_others():
    store = BasketStore()
    basket = _basket(1)
    store.add_basket(basket)
    store.delete_basket(5)
    assert store.get_basket(1) is basket