"""Token-sequence trie whose nodes aggregate every path passing through them."""

from __future__ import annotations

import dataclasses
from typing import Callable, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclasses.dataclass(slots=True)
class TrieNode(Generic[K, V]):
    """A node exclusively owned by its parent (or by the trie, for the root)."""

    value: V
    children: Dict[K, "TrieNode[K, V]"] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True, slots=True)
class KeyValue(Generic[K, V]):
    """A full path through the trie together with the value stored at its end."""

    key: Tuple[K, ...]
    value: V


class PrefixTrie(Generic[K, V]):
    """Map token sequences to aggregated values with prefix semantics.

    ``update_path`` folds one observation into every node along a path,
    including the root, so each node's value covers all sequences that start
    with that node's path. The root stands for the empty prefix.
    """

    def __init__(self, default_factory: Callable[[], V]) -> None:
        self._default_factory = default_factory
        self._root: TrieNode[K, V] = TrieNode(default_factory())

    @property
    def root_value(self) -> V:
        return self._root.value

    def update_path(self, sequence: Iterable[K], f: Callable[[V], V]) -> None:
        """Apply ``f`` to the value of every node along ``sequence``.

        Missing nodes are created with the default value before ``f`` runs.
        """

        node = self._root
        for token in sequence:
            node.value = f(node.value)
            child = node.children.get(token)
            if child is None:
                child = TrieNode(self._default_factory())
                node.children[token] = child
            node = child
        node.value = f(node.value)

    def get(self, sequence: Iterable[K]) -> Optional[V]:
        """Return the value stored for exactly ``sequence``, if that path exists."""

        node = self._find(sequence)
        return None if node is None else node.value

    def __contains__(self, sequence: Iterable[K]) -> bool:
        return self._find(sequence) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._walk())

    def items(self) -> Iterator[KeyValue[K, V]]:
        """Yield every non-root path depth-first, children in insertion order."""

        for path, node in self._walk():
            yield KeyValue(path, node.value)

    def consume(self) -> TrieNode[K, V]:
        """Hand the whole tree over to the caller and leave this trie empty."""

        root = self._root
        self._root = TrieNode(self._default_factory())
        return root

    def _find(self, sequence: Iterable[K]) -> Optional[TrieNode[K, V]]:
        node = self._root
        for token in sequence:
            child = node.children.get(token)
            if child is None:
                return None
            node = child
        return node

    def _walk(self) -> Iterator[Tuple[Tuple[K, ...], TrieNode[K, V]]]:
        stack: List[Tuple[Tuple[K, ...], TrieNode[K, V]]] = [
            ((token,), child) for token, child in reversed(self._root.children.items())
        ]
        while stack:
            path, node = stack.pop()
            yield path, node
            stack.extend(
                (path + (token,), child) for token, child in reversed(node.children.items())
            )
