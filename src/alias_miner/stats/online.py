"""Single-pass mean and variance for unbounded streams of samples."""

from __future__ import annotations

import dataclasses
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable


@dataclasses.dataclass(frozen=True, slots=True)
class OnlineStat:
    """Welford accumulator of count, mean and squared deviations.

    Instances are immutable: :meth:`update` returns a new accumulator, so a
    value can be shared between trie nodes without copying.
    """

    count: int = 0
    mean: float = 0.0
    m2: float = 0.0

    @classmethod
    def from_samples(cls, samples: Iterable[float]) -> "OnlineStat":
        stat = cls()
        for sample in samples:
            stat = stat.update(sample)
        return stat

    def update(self, sample: float) -> "OnlineStat":
        """Return a new accumulator that also includes ``sample``."""

        sample = float(sample)
        count = self.count + 1
        delta = sample - self.mean
        mean = self.mean + delta / count
        return OnlineStat(count=count, mean=mean, m2=self.m2 + delta * (sample - mean))

    def variance(self) -> float:
        """Population variance of the samples seen so far.

        Undefined for an empty accumulator: callers must only ask once at least
        one sample was folded in (the result is NaN otherwise).
        """

        if self.count == 0:
            return math.nan
        return self.m2 / self.count

    def std(self) -> float:
        return math.sqrt(self.variance())

    def mean_as_time(self) -> datetime:
        """Mean sample interpreted as a Unix timestamp."""

        return datetime.fromtimestamp(int(self.mean), tz=timezone.utc)

    def std_as_duration(self) -> timedelta:
        """Standard deviation in whole seconds."""

        return timedelta(seconds=int(self.std()))
