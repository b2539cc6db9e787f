"""Bounded and prefix-aggregating containers used by the suggestion engine."""

from alias_miner.structures.capped_heap import CappedHeap
from alias_miner.structures.prefix_trie import KeyValue, PrefixTrie, TrieNode

__all__ = ["CappedHeap", "KeyValue", "PrefixTrie", "TrieNode"]
