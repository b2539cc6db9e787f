"""End-to-end entry points: history records in, ranked alias suggestions out."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from alias_miner.structures import PrefixTrie
from alias_miner.suggest.ranking import RankedCandidate, RankingStrategy, UsesOnly
from alias_miner.suggest.usage import UsageAggregate

Record = Tuple[Sequence[str], Optional[int]]


@dataclasses.dataclass(frozen=True, slots=True)
class Suggestion:
    """A command prefix worth aliasing, with its usage summary."""

    path: Tuple[str, ...]
    uses: int
    rank: float
    mean_time: Optional[datetime] = None
    std_time: Optional[timedelta] = None
    last_executed: Optional[datetime] = None

    @property
    def command(self) -> str:
        return " ".join(self.path)

    @classmethod
    def from_ranked(cls, ranked: RankedCandidate) -> "Suggestion":
        usage = ranked.candidate.value
        path = tuple(ranked.candidate.key)
        stats = usage.time_stats
        try:
            mean_time = stats.mean_as_time() if stats is not None else None
            std_time = stats.std_as_duration() if stats is not None else None
            last_executed = usage.last_executed_time()
        except (OverflowError, ValueError, OSError) as exc:
            # Timestamps beyond datetime's range (e.g. millisecond epochs) have no display form.
            logger.warning("Dropping call times for {!r}: {}", " ".join(path), exc)
            mean_time = std_time = last_executed = None
        return cls(
            path=path,
            uses=usage.count,
            rank=ranked.rank,
            mean_time=mean_time,
            std_time=std_time,
            last_executed=last_executed,
        )


def build(records: Iterable[Record]) -> PrefixTrie[str, UsageAggregate]:
    """Count every prefix of every executed command.

    ``cargo run`` counts as one use of ``cargo run`` and one use of ``cargo``.
    Records are ``(tokens, timestamp)`` pairs; the timestamp may be ``None``.
    """

    trie: PrefixTrie[str, UsageAggregate] = PrefixTrie(UsageAggregate)
    for tokens, time in records:
        trie.update_path(tokens, lambda usage: usage.update(time))
    logger.debug("Built history trie from {} commands", trie.root_value.count)
    return trie


def suggest(
    trie: PrefixTrie[str, UsageAggregate],
    n: int,
    strategy: Optional[RankingStrategy] = None,
) -> List[Suggestion]:
    """Consume ``trie`` and return at most ``n`` suggestions, best first."""

    ranked = (strategy or UsesOnly()).select(trie, n)
    return [Suggestion.from_ranked(item) for item in ranked]
