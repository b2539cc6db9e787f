"""Validated settings for alias suggestion runs, optionally loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from alias_miner.suggest import (
    FeatureWeighted,
    HeuristicComparator,
    HeuristicThresholds,
    RankingStrategy,
    RankingStrategyType,
    UsesOnly,
    build_features,
)
from alias_miner.suggest.ranking import DEFAULT_WEIGHTS, FEATURE_EXTRACTORS


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be read or is invalid."""


class SuggestConfig(BaseModel):
    """Configuration for a suggestion run."""

    model_config = ConfigDict(validate_assignment=True)

    history_file: Path = Field(default_factory=lambda: Path.home() / ".histfile")
    count: int = Field(default=10, ge=0)
    strategy: RankingStrategyType = RankingStrategyType.FEATURE_WEIGHTED

    short_command_threshold: int = Field(default=10, gt=0)
    low_argc_threshold: int = Field(default=2, gt=0)
    similarity_threshold: float = Field(default=0.2)

    feature_weights: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_WEIGHTS))

    @field_validator("similarity_threshold")
    @classmethod
    def _check_similarity(cls, value: float) -> float:
        if not 0.0 < value < 1.0:
            raise ValueError("similarity_threshold must be between 0 and 1")
        return value

    @field_validator("feature_weights")
    @classmethod
    def _check_weights(cls, value: Dict[str, float]) -> Dict[str, float]:
        unknown = sorted(set(value) - set(FEATURE_EXTRACTORS))
        if unknown:
            raise ValueError(f"unknown feature weights: {', '.join(unknown)}")
        negative = sorted(tag for tag, weight in value.items() if weight < 0)
        if negative:
            raise ValueError(f"feature weights must be non-negative: {', '.join(negative)}")
        return value

    def build_strategy(self) -> RankingStrategy:
        """Instantiate the ranking strategy this configuration selects."""

        if self.strategy is RankingStrategyType.USES:
            return UsesOnly()
        if self.strategy is RankingStrategyType.HEURISTIC:
            return HeuristicComparator(
                HeuristicThresholds(
                    short_command=self.short_command_threshold,
                    low_argc=self.low_argc_threshold,
                    similarity=self.similarity_threshold,
                )
            )
        return FeatureWeighted(build_features(self.feature_weights))


class ConfigLoader:
    """Loads :class:`SuggestConfig` from YAML files."""

    def load(self, path: Path, overrides: Optional[Dict[str, Any]] = None) -> SuggestConfig:
        data = self._read_yaml(path)
        data.update({key: value for key, value in (overrides or {}).items() if value is not None})
        try:
            return SuggestConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with Path(path).open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read configuration {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {path} must be a mapping, got {type(data).__name__}")
        return data
