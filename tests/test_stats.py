import dataclasses

import pytest

from knapsack_lab.stats import Measurement, TimeStats


def _stats():
    return TimeStats(1.5, 0.25, 1.0, 0.125)


def test_scaled_by_one_is_identity():
    stats = _stats()
    assert stats.scaled(1) == stats


def test_scaled_divides_every_field():
    stats = _stats()
    halved = stats.scaled(2)
    assert halved.mean_time_ms * 2 == stats.mean_time_ms
    assert halved.std_dev_ms * 2 == stats.std_dev_ms
    assert halved.median_time_ms * 2 == stats.median_time_ms
    assert halved.median_abs_dev_ms * 2 == stats.median_abs_dev_ms


def test_scaled_round_trip():
    stats = _stats()
    assert stats.scaled(4).scaled(0.25) == stats


def test_scaled_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        _stats().scaled(0)


def test_time_stats_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _stats().mean_time_ms = 2.0


def test_measurement_holds_values():
    stats = _stats()
    measurement = Measurement("Dynamic", 100.0, stats)
    assert measurement.solver_name == "Dynamic"
    assert measurement.correct_rate == 100.0
    assert measurement.time_stats == stats


def test_measurement_equality_and_immutability():
    first = Measurement("Greedy", 50.0, _stats())
    assert first == Measurement("Greedy", 50.0, _stats())
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.correct_rate = 0.0