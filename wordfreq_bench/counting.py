"""Counting words with a hash map and ranking them by frequency."""

from __future__ import annotations

from collections import Counter
from typing import List, Mapping, Tuple

from .textio import iter_words


def count_words(data: bytes) -> Counter:
    """Count each lowercased ASCII word in ``data``."""
    return Counter(iter_words(data))


def rank_words(counts: Mapping[bytes, int]) -> List[Tuple[bytes, int]]:
    """Order words by descending count, then ascending word."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def rank_ordered(counts: Mapping[bytes, int]) -> List[Tuple[bytes, int]]:
    """Rank words taken in key order with a stable sort by descending count.

    This is how an ordered (trie-like) map is ranked: ties keep the
    lexicographic order of its iteration.
    """
    ordered = sorted(counts.items())
    ordered.sort(key=lambda item: item[1], reverse=True)
    return ordered