"""Streaming summary statistics."""

from alias_miner.stats.online import OnlineStat

__all__ = ["OnlineStat"]
