import pytest

from raptoroms.latency import AvgLatency


def test_equal_history_and_today_gives_that_value():
    latency = AvgLatency([1000] * 24, [1000] * 24)
    assert latency.latency_adjustment(5) == 1000


def test_today_weighs_more_than_history():
    latency = AvgLatency([0] * 24, [1000] * 24)
    value = latency.latency_adjustment(3)
    assert 500 < value <= 1000


def test_history_weighs_less():
    latency = AvgLatency([1000] * 24, [0] * 24)
    value = latency.latency_adjustment(3)
    assert 0 <= value < 500


def test_default_hour_uses_current_hour():
    latency = AvgLatency([1000] * 24, [1000] * 24)
    assert latency.latency_adjustment() == 1000


def test_missing_hour_raises():
    latency = AvgLatency([10] * 3, [10] * 3)
    with pytest.raises(IndexError):
        latency.latency_adjustment(5)


def test_negative_hour_raises():
    latency = AvgLatency([10] * 24, [10] * 24)
    with pytest.raises(IndexError):
        latency.latency_adjustment(-1)