"""Counting words in a prefix tree over the lowercase ASCII alphabet."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple, Union

from .textio import iter_words

_ALPHABET = frozenset(range(ord("a"), ord("z") + 1))


class _Node:
    __slots__ = ("count", "children")

    def __init__(self) -> None:
        self.count = 0
        self.children: Dict[int, _Node] = {}


class Trie:
    """A prefix tree that counts occurrences of lowercase ASCII words."""

    def __init__(self) -> None:
        self._root = _Node()
        self._distinct = 0
        self.node_count = 1

    def add(self, word: Union[bytes, str]) -> int:
        """Count one occurrence of ``word`` and return its new count.

        The word must be a non-empty run of the letters ``a`` to ``z``.
        """
        if isinstance(word, str):
            try:
                word = word.encode("ascii")
            except UnicodeEncodeError as error:
                raise ValueError(f"not a lowercase ASCII word: {word!r}") from error
        if not word:
            raise ValueError("cannot add an empty word")
        if not _ALPHABET.issuperset(word):
            raise ValueError(f"not a lowercase ASCII word: {word!r}")
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                child = node.children[letter] = _Node()
                self.node_count += 1
            node = child
        if node.count == 0:
            self._distinct += 1
        node.count += 1
        return node.count

    def items(self) -> Iterator[Tuple[bytes, int]]:
        """Yield ``(word, count)`` pairs in lexicographic order."""
        stack: List[Tuple[_Node, bytes]] = [
            (child, bytes((letter,)))
            for letter, child in sorted(self._root.children.items(), reverse=True)
        ]
        while stack:
            node, word = stack.pop()
            if node.count:
                yield word, node.count
            stack.extend(
                (child, word + bytes((letter,)))
                for letter, child in sorted(node.children.items(), reverse=True)
            )

    def __len__(self) -> int:
        return self._distinct


def count_words_trie(data: bytes) -> Trie:
    """Build a trie holding the count of each lowercased word in ``data``."""
    trie = Trie()
    for word in iter_words(data):
        trie.add(word)
    return trie


def rank_trie(data: bytes) -> List[Tuple[bytes, int]]:
    """Rank the words of ``data`` by descending count.

    Words with equal counts keep the lexicographic order of the trie.
    """
    ranking = list(count_words_trie(data).items())
    ranking.sort(key=lambda item: item[1], reverse=True)
    return ranking