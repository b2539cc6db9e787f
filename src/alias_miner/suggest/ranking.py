"""Ranking strategies for alias candidates extracted from the history trie."""

from __future__ import annotations

import dataclasses
import functools
from enum import Enum
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Protocol, Sequence, Tuple

from loguru import logger

from alias_miner.structures import KeyValue, PrefixTrie
from alias_miner.suggest.extraction import TopKExtractor, by_count
from alias_miner.suggest.usage import UsageAggregate

Candidate = KeyValue[str, UsageAggregate]


class Feature(NamedTuple):
    """A scalar property of a candidate and the weight applied once normalized."""

    tag: str
    extract: Callable[[Candidate], float]
    weight: Callable[[float], float]


def command_length(candidate: Candidate) -> int:
    return len(" ".join(candidate.key))


def argument_count(candidate: Candidate) -> int:
    return len(candidate.key)


def _uses(candidate: Candidate) -> float:
    return float(candidate.value.count)


def _mean_time(candidate: Candidate) -> float:
    stats = candidate.value.time_stats
    return stats.mean if stats is not None else 0.0


def _time_variance(candidate: Candidate) -> float:
    stats = candidate.value.time_stats
    return stats.variance() if stats is not None else 0.0


def linear(factor: float) -> Callable[[float], float]:
    def _weight(x: float) -> float:
        return factor * x

    return _weight


FEATURE_EXTRACTORS: Dict[str, Callable[[Candidate], float]] = {
    "uses": _uses,
    "length": lambda candidate: float(command_length(candidate)),
    "argc": lambda candidate: float(argument_count(candidate)),
    "mean_time": _mean_time,
    "time_variance": _time_variance,
}

DEFAULT_WEIGHTS: Dict[str, float] = {
    "uses": 10.0,
    "length": 2.0,
    "argc": 1.0,
    "mean_time": 1.0,
    "time_variance": 1.0,
}


def build_features(weights: Optional[Mapping[str, float]] = None) -> Tuple[Feature, ...]:
    """Linear-weighted features, in a fixed order, with optional overrides."""

    merged = dict(DEFAULT_WEIGHTS)
    if weights:
        unknown = set(weights) - set(FEATURE_EXTRACTORS)
        if unknown:
            raise ValueError(f"Unknown feature tags: {sorted(unknown)}")
        merged.update(weights)
    return tuple(
        Feature(tag, FEATURE_EXTRACTORS[tag], linear(merged[tag])) for tag in FEATURE_EXTRACTORS
    )


DEFAULT_FEATURES = build_features()


@dataclasses.dataclass(frozen=True, slots=True)
class RankedCandidate:
    candidate: Candidate
    rank: float


def normalize(value: float, low: float, high: float) -> float:
    """Min-max scale ``value`` into [0, 1]; a zero-width range maps to 0."""

    spread = high - low
    if spread == 0:
        return 0.0
    return (value - low) / spread


def rank(candidates: Sequence[Candidate], features: Sequence[Feature]) -> List[RankedCandidate]:
    """Score candidates by weighted, min-max normalized features, best first.

    A feature that is constant over the candidate set normalizes to 0 for every
    candidate, which still contributes ``weight(0)`` to each total. Equal totals
    keep the order in which the candidates were given.
    """

    if not candidates:
        return []

    evaluations = [[feature.extract(candidate) for feature in features] for candidate in candidates]
    bounds = [(min(column), max(column)) for column in zip(*evaluations)]

    ranked = []
    for candidate, evaluation in zip(candidates, evaluations):
        total = sum(
            feature.weight(normalize(value, low, high))
            for feature, value, (low, high) in zip(features, evaluation, bounds)
        )
        ranked.append(RankedCandidate(candidate, total))

    ranked.sort(key=lambda item: item.rank, reverse=True)
    return ranked


@dataclasses.dataclass(frozen=True, slots=True)
class HeuristicThresholds:
    short_command: int = 10
    low_argc: int = 2
    similarity: float = 0.2


def _cmp(a: float, b: float) -> int:
    return (a > b) - (a < b)


def _compare_in_order(a: Tuple[float, ...], b: Tuple[float, ...]) -> int:
    for left, right in zip(a, b):
        order = _cmp(left, right)
        if order:
            return order
    return 0


def _similar(a: int, b: int, threshold: float) -> bool:
    average = (a + b) / 2
    if average == 0:
        return True
    return abs(a - b) / average < threshold


def heuristic_compare(
    a: Candidate,
    b: Candidate,
    thresholds: HeuristicThresholds = HeuristicThresholds(),
) -> int:
    """Order two candidates by how worthwhile an alias for them would be.

    Which of command length, argument count and execution count dominates
    depends on the regime the pair falls into. Larger is better in every
    dimension. Returns a negative number, zero or a positive number like a
    classic ``cmp`` function.
    """

    a_len, b_len = command_length(a), command_length(b)
    a_argc, b_argc = argument_count(a), argument_count(b)
    a_uses, b_uses = a.value.count, b.value.count

    if a_len < thresholds.short_command or b_len < thresholds.short_command:
        return _compare_in_order((a_len, a_argc, a_uses), (b_len, b_argc, b_uses))
    if a_argc < thresholds.low_argc or b_argc < thresholds.low_argc:
        return _compare_in_order((a_argc, a_len, a_uses), (b_argc, b_len, b_uses))
    if _similar(a_uses, b_uses, thresholds.similarity):
        return _compare_in_order((a_argc, a_len, a_uses), (b_argc, b_len, b_uses))
    return _compare_in_order((a_uses, a_argc, a_len), (b_uses, b_argc, b_len))


class RankingStrategyType(str, Enum):
    """Named ranking strategies selectable from configuration."""

    USES = "uses"
    FEATURE_WEIGHTED = "feature_weighted"
    HEURISTIC = "heuristic"


class RankingStrategy(Protocol):
    """Selects and orders at most ``n`` candidates from a trie it consumes."""

    def select(self, trie: PrefixTrie[str, UsageAggregate], n: int) -> List[RankedCandidate]:
        """Return up to ``n`` ranked candidates, best first."""


class UsesOnly:
    """Rank purely by execution count; the walk prunes below the heap floor."""

    def select(self, trie: PrefixTrie[str, UsageAggregate], n: int) -> List[RankedCandidate]:
        extracted = TopKExtractor(n, key=by_count, monotonic=True).drain(trie)
        return [RankedCandidate(candidate, float(candidate.value.count)) for candidate in extracted]


class FeatureWeighted:
    """Take the top candidates by count, then re-score them by weighted features."""

    def __init__(self, features: Sequence[Feature] = DEFAULT_FEATURES) -> None:
        self.features = tuple(features)

    def select(self, trie: PrefixTrie[str, UsageAggregate], n: int) -> List[RankedCandidate]:
        extracted = TopKExtractor(n, key=by_count, monotonic=True).drain(trie)
        ranked = rank(extracted, self.features)
        logger.debug("Scored {} candidates on {} features", len(ranked), len(self.features))
        return ranked


class HeuristicComparator:
    """Run the extraction itself under :func:`heuristic_compare`.

    The heuristic is not monotonic with path depth, so every node is visited.
    The resulting rank is the ordinal position, ``n`` for the best candidate
    down to 1.
    """

    def __init__(self, thresholds: HeuristicThresholds = HeuristicThresholds()) -> None:
        self.thresholds = thresholds

    def compare(self, a: Candidate, b: Candidate) -> int:
        return heuristic_compare(a, b, self.thresholds)

    def select(self, trie: PrefixTrie[str, UsageAggregate], n: int) -> List[RankedCandidate]:
        extractor = TopKExtractor(n, key=functools.cmp_to_key(self.compare), monotonic=False)
        extracted = extractor.drain(trie)
        total = len(extracted)
        return [
            RankedCandidate(candidate, float(total - position))
            for position, candidate in enumerate(extracted)
        ]
