import threading

import pytest

from raptoroms.venue_rank import VenueRank


def test_default_rank_is_zero():
    assert VenueRank().rank() == 0.0


def test_trading_cost_weight():
    assert VenueRank(venue_trading_cost=1.0).rank() == pytest.approx(0.15)


def test_immediate_volume_weight():
    assert VenueRank(immediate_trading_volume=1.0).rank() == pytest.approx(0.4)


def test_rank_is_linear():
    a = VenueRank(0.1, 0.5, 0.1, 0.5, 0.5)
    b = VenueRank(0.2, 0.5, 0.3, 0.4, 0.2)
    both = VenueRank(0.3, 1.0, 0.4, 0.9, 0.7)
    assert both.rank() == pytest.approx(a.rank() + b.rank())


@pytest.mark.parametrize(
    "method, field",
    [
        ("inc_router_historic_trading_volume", "router_historic_trading_volume"),
        ("inc_market_historic_trading_volume", "market_historic_trading_volume"),
        ("inc_immediate_trading_volume", "immediate_trading_volume"),
        ("inc_price_improvement_indicator", "price_improvement_indicator"),
    ],
)
def test_increment_matches_constructed_rank(method, field):
    rank = VenueRank()
    getattr(rank, method)(2.5)
    assert getattr(rank, field) == 2.5
    assert rank.rank() == pytest.approx(VenueRank(**{field: 2.5}).rank())


def test_higher_immediate_volume_ranks_higher():
    low = VenueRank(0.4, 0.5, 0.4, 0.2, 0.1)
    high = VenueRank(0.4, 0.5, 0.4, 0.6, 0.1)
    assert high.rank() > low.rank()


def test_concurrent_increments_are_not_lost():
    rank = VenueRank()
    threads_n, per_thread = 8, 1000

    def work():
        for _ in range(per_thread):
            rank.inc_immediate_trading_volume(1.0)

    threads = [threading.Thread(target=work) for _ in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert rank.immediate_trading_volume == threads_n * per_thread