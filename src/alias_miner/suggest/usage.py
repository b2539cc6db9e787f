"""Per-prefix usage statistics stored in the history trie."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from typing import Optional

from alias_miner.stats import OnlineStat


@dataclasses.dataclass(frozen=True, slots=True)
class UsageAggregate:
    """How often a command prefix ran and when.

    ``time_stats`` only exists once an execution carried a timestamp, and only
    covers timestamped executions; untimed executions still bump ``count``.
    """

    count: int = 0
    time_stats: Optional[OnlineStat] = None
    last_executed: Optional[int] = None

    def update(self, timestamp: Optional[int] = None) -> "UsageAggregate":
        """Return the aggregate with one more execution folded in."""

        if timestamp is None:
            return dataclasses.replace(self, count=self.count + 1)

        stats = self.time_stats or OnlineStat()
        last = timestamp if self.last_executed is None else max(self.last_executed, timestamp)
        return UsageAggregate(
            count=self.count + 1,
            time_stats=stats.update(timestamp),
            last_executed=last,
        )

    def last_executed_time(self) -> Optional[datetime]:
        if self.last_executed is None:
            return None
        return datetime.fromtimestamp(self.last_executed, tz=timezone.utc)
