"""Bounded top-N selection over a prefix trie."""

from __future__ import annotations

from typing import Any, Callable, Hashable, List, Optional, Tuple, TypeVar

from loguru import logger

from alias_miner.structures import CappedHeap, KeyValue, PrefixTrie, TrieNode

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

CandidateKey = Callable[[KeyValue[Any, Any]], Any]


def by_value(candidate: KeyValue[Any, Any]) -> Any:
    return candidate.value


def by_count(candidate: KeyValue[Any, Any]) -> int:
    return candidate.value.count


class TopKExtractor:
    """Drain a trie into its ``n`` highest-ranked ``(path, value)`` pairs.

    Every non-root node is offered to a :class:`CappedHeap` during a depth-first
    walk. With ``monotonic=True`` the caller promises that no node outranks its
    parent (raw counts, for instance), which lets the walk skip the subtree of
    any node the heap rejected. Other orders must leave ``monotonic`` off so that
    every node is visited.
    """

    def __init__(
        self,
        n: int,
        key: Optional[CandidateKey] = None,
        monotonic: bool = False,
    ) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.n = n
        self.key = key or by_value
        self.monotonic = monotonic

    def drain(self, trie: PrefixTrie[K, V]) -> List[KeyValue[K, V]]:
        """Consume ``trie`` and return the selected candidates, best first."""

        if self.n == 0:
            return []

        heap: CappedHeap[KeyValue[K, V]] = CappedHeap(self.n, key=self.key)
        root = trie.consume()
        stack: List[Tuple[Tuple[K, ...], TrieNode[K, V]]] = [
            ((token,), child) for token, child in reversed(root.children.items())
        ]
        root.children.clear()

        visited = 0
        pruned = 0
        while stack:
            path, node = stack.pop()
            visited += 1
            retained = heap.insert(KeyValue(path, node.value))
            if node.children and (retained or not self.monotonic):
                stack.extend(
                    (path + (token,), child) for token, child in reversed(node.children.items())
                )
            elif node.children:
                pruned += 1
            node.children.clear()

        logger.debug(
            "Extracted top {n} of trie: visited={visited}, pruned={pruned}, monotonic={monotonic}",
            n=self.n,
            visited=visited,
            pruned=pruned,
            monotonic=self.monotonic,
        )
        return heap.drain_sorted_descending()
