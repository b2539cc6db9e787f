"""Tests for bounded top-N extraction from the history trie."""

import pytest
from loguru import logger

from alias_miner.structures import KeyValue, PrefixTrie
from alias_miner.suggest import TopKExtractor, UsageAggregate, build, by_count

HISTORY = [
    (("abc", "123"), None),
    (("cargo",), None),
    (("cargo", "run"), None),
    (("cargo", "run", "--release"), None),
]


def _counts(items):
    return [(" ".join(item.key), item.value.count) for item in items]


def test_top_two_by_count():
    items = TopKExtractor(2, key=by_count, monotonic=True).drain(build(HISTORY))

    assert _counts(items) == [("cargo", 3), ("cargo run", 2)]


def test_top_two_with_repeated_records():
    records = [
        (("cargo",), None),
        (("cargo", "run"), None),
        (("cargo", "run"), None),
        (("cargo", "run", "--release"), None),
    ]
    items = TopKExtractor(2, key=by_count, monotonic=True).drain(build(records))

    assert _counts(items) == [("cargo", 4), ("cargo run", 3)]


def test_zero_returns_nothing_and_leaves_trie_alone():
    trie = build(HISTORY)

    assert TopKExtractor(0, key=by_count).drain(trie) == []
    assert trie.get(["cargo"]).count == 3


@pytest.mark.parametrize("n", [5, 20])
def test_large_n_returns_every_path_sorted(n: int):
    items = TopKExtractor(n, key=by_count, monotonic=True).drain(build(HISTORY))

    assert len(items) == 5
    counts = [item.value.count for item in items]
    assert counts == sorted(counts, reverse=True)
    assert {item.key for item in items} == {
        ("abc",),
        ("abc", "123"),
        ("cargo",),
        ("cargo", "run"),
        ("cargo", "run", "--release"),
    }


def test_root_is_never_a_candidate():
    items = TopKExtractor(10, key=by_count).drain(build(HISTORY))
    assert all(item.key for item in items)


def test_drain_consumes_the_trie():
    trie = build(HISTORY)
    TopKExtractor(1, key=by_count, monotonic=True).drain(trie)

    assert len(trie) == 0
    assert trie.get(["cargo"]) is None


def test_unpruned_walk_finds_deep_winners():
    # Deeper paths outrank their parents under this order, so pruning would miss them.
    trie = PrefixTrie(int)
    trie.update_path(["a"], lambda v: v + 1)
    trie.update_path(["b", "c", "d"], lambda v: v + 1)

    def depth(candidate: KeyValue) -> int:
        return len(candidate.key)

    full = TopKExtractor(1, key=depth, monotonic=False).drain(trie)
    assert [item.key for item in full] == [("b", "c", "d")]


def test_pruned_walk_matches_full_walk_for_counts():
    records = [(tuple(cmd.split()), None) for cmd in [
        "git status", "git status", "git commit -m", "git push", "ls -la", "ls", "make test",
        "make test", "make test", "git status -s",
    ]]
    pruned = TopKExtractor(3, key=by_count, monotonic=True).drain(build(records))
    full = TopKExtractor(3, key=by_count, monotonic=False).drain(build(records))

    assert _counts(pruned) == _counts(full)


def test_negative_n_is_rejected():
    with pytest.raises(ValueError):
        TopKExtractor(-1)


def test_usage_values_survive_extraction():
    trie = PrefixTrie(UsageAggregate)
    trie.update_path(["x"], lambda usage: usage.update())
    items = TopKExtractor(1, key=by_count).drain(trie)
    assert items[0].value == UsageAggregate(count=1)


def _walk_stats(extractor, trie):
    records = []
    handler_id = logger.add(lambda message: records.append(message.record["extra"]), level="DEBUG")
    try:
        items = extractor.drain(trie)
    finally:
        logger.remove(handler_id)
    return items, records[-1]


def test_monotonic_walk_skips_rejected_subtrees():
    records = [(("a", "b", "c"), None)] + [(("x",), None)] * 5

    items, stats = _walk_stats(TopKExtractor(1, key=by_count, monotonic=True), build(records))

    assert _counts(items) == [("x", 5)]
    # "a b" is rejected by the full heap, so "a b c" is never visited
    assert (stats["visited"], stats["pruned"]) == (3, 1)


def test_non_monotonic_walk_visits_every_node():
    records = [(("a", "b", "c"), None)] + [(("x",), None)] * 5

    items, stats = _walk_stats(TopKExtractor(1, key=by_count, monotonic=False), build(records))

    assert _counts(items) == [("x", 5)]
    assert (stats["visited"], stats["pruned"]) == (4, 0)
