"""Aggregation, extraction and ranking of alias candidates."""

from alias_miner.suggest.extraction import TopKExtractor, by_count, by_value
from alias_miner.suggest.pipeline import Suggestion, build, suggest
from alias_miner.suggest.ranking import (
    DEFAULT_FEATURES,
    Feature,
    FeatureWeighted,
    HeuristicComparator,
    HeuristicThresholds,
    RankedCandidate,
    RankingStrategy,
    RankingStrategyType,
    UsesOnly,
    build_features,
    heuristic_compare,
    rank,
)
from alias_miner.suggest.usage import UsageAggregate

__all__ = [
    "DEFAULT_FEATURES",
    "Feature",
    "FeatureWeighted",
    "HeuristicComparator",
    "HeuristicThresholds",
    "RankedCandidate",
    "RankingStrategy",
    "RankingStrategyType",
    "Suggestion",
    "TopKExtractor",
    "UsageAggregate",
    "UsesOnly",
    "build",
    "build_features",
    "by_count",
    "by_value",
    "heuristic_compare",
    "rank",
    "suggest",
]
