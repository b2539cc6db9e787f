"""Tests for the per-prefix usage aggregate."""

from datetime import datetime, timezone

from alias_miner.stats import OnlineStat
from alias_miner.suggest import UsageAggregate


def test_default_is_empty():
    assert UsageAggregate() == UsageAggregate(count=0, time_stats=None, last_executed=None)


def test_untimed_update_only_counts():
    usage = UsageAggregate().update()

    assert usage.count == 1
    assert usage.time_stats is None
    assert usage.last_executed is None


def test_timed_update_starts_time_stats():
    usage = UsageAggregate().update(5)

    assert usage.count == 1
    assert usage.time_stats == OnlineStat().update(5)
    assert usage.last_executed == 5


def test_time_stats_only_cover_supplied_timestamps():
    usage = UsageAggregate().update(2).update(None).update(4)

    assert usage.count == 3
    assert usage.time_stats.count == 2
    assert usage.time_stats.mean == 3.0


def test_last_executed_keeps_the_latest_time():
    base = UsageAggregate(count=1, time_stats=OnlineStat().update(5), last_executed=5)

    assert base.update(None).last_executed == 5
    assert base.update(3).last_executed == 5
    assert base.update(6).last_executed == 6


def test_update_does_not_mutate():
    base = UsageAggregate()
    base.update(7)
    assert base.count == 0


def test_last_executed_time():
    usage = UsageAggregate().update(1565737322)
    assert usage.last_executed_time() == datetime(2019, 8, 13, 23, 2, 2, tzinfo=timezone.utc)
    assert UsageAggregate().last_executed_time() is None
