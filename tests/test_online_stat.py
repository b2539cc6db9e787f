"""Tests for the single-pass mean/variance accumulator."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from alias_miner.stats import OnlineStat


@pytest.mark.parametrize(
    "samples",
    [
        [5.0],
        [2.0, 4.0],
        [2.0, 4.0, 6.0],
        [123.0, 523411.0, 2343333.0, 44444.0, 23417.0, 234.0],
    ],
)
def test_matches_direct_mean_and_population_variance(samples):
    mean = sum(samples) / len(samples)
    variance = sum((x - mean) ** 2 for x in samples) / len(samples)

    stat = OnlineStat.from_samples(samples)

    assert stat.count == len(samples)
    assert stat.mean == pytest.approx(mean, rel=1e-12)
    assert stat.variance() == pytest.approx(variance, rel=1e-9)


def test_update_returns_new_accumulator():
    base = OnlineStat()
    updated = base.update(10)

    assert base == OnlineStat(0, 0.0, 0.0)
    assert updated == OnlineStat(1, 10.0, 0.0)


def test_empty_variance_is_nan_not_an_error():
    assert math.isnan(OnlineStat().variance())


def test_display_conversions():
    stat = OnlineStat.from_samples([1_556_991_281, 1_556_993_411])

    assert stat.mean_as_time() == datetime.fromtimestamp(1_556_992_346, tz=timezone.utc)
    # population std of two samples is half their distance
    assert stat.std_as_duration() == timedelta(seconds=1065)
