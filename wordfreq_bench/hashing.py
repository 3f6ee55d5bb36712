"""Counting words by CRC-32C hash instead of by comparing the words.

Two counters are provided. ``ChunkedHashTable`` splits each hash into a
bucket index (the low bits) and a tag (the high bits), with a fixed number
of slots per bucket. ``SparseCounter`` keys directly on the full 32-bit
hash. Neither compares words: words whose hashes coincide are counted
together under the first word seen, which is why a collision-free
("perfect") seed must be chosen for the input.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .textio import iter_words

CHUNKED_SEED = 10675
SPARSE_SEED = 23

TABLE_ORDER = 17
TABLE_MASK = (1 << TABLE_ORDER) - 1
SLOTS_PER_CHUNK = 8

COUNTER_BITS = 24
_COUNTER_MASK = (1 << COUNTER_BITS) - 1
_HASH_MASK = 0xFFFFFFFF

_POLYNOMIAL = 0x82F63B78


def _make_table() -> Tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()

Word = Union[bytes, str]


def _as_bytes(word: Word) -> bytes:
    if isinstance(word, str):
        return word.encode("ascii")
    return bytes(word)


def crc32c(data: Word, seed: int = 0) -> int:
    """Fold ``data`` into the CRC-32C accumulator ``seed``.

    No initial or final inversion is applied, so the result can be fed
    back in as the seed for the following bytes.
    """
    crc = seed & _HASH_MASK
    for byte in _as_bytes(data):
        crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc


def _check_hash(hash_value: int) -> int:
    if not 0 <= hash_value <= _HASH_MASK:
        raise ValueError(f"hash value out of 32-bit range: {hash_value}")
    return hash_value


def _rank(entries: Iterable[Tuple[bytes, int]]) -> List[Tuple[bytes, int]]:
    return sorted(entries, key=lambda item: (-item[1], item[0]))


class HashCollisionError(RuntimeError):
    """Raised when a bucket of the chunked table has no free slot left."""


class _Slot:
    __slots__ = ("tag", "count", "word")

    def __init__(self, tag: int, word: bytes) -> None:
        self.tag = tag
        self.count = 0
        self.word = word


class ChunkedHashTable:
    """Counts words in buckets of a fixed number of tagged slots."""

    default_seed = CHUNKED_SEED

    def __init__(self) -> None:
        self._buckets: Dict[int, List[_Slot]] = {}

    def add(self, hash_value: int, word: Word) -> int:
        """Count one occurrence of the word with ``hash_value``.

        Returns the new count. The word is remembered only the first time
        its hash is seen.
        """
        _check_hash(hash_value)
        low = hash_value & TABLE_MASK
        tag = hash_value >> TABLE_ORDER
        bucket = self._buckets.setdefault(low, [])
        slot = next((s for s in bucket if s.tag == tag), None)
        if slot is None:
            if len(bucket) >= SLOTS_PER_CHUNK:
                raise HashCollisionError(
                    f"more than {SLOTS_PER_CHUNK} distinct hashes in bucket {low}"
                )
            slot = _Slot(tag, _as_bytes(word).lower())
            bucket.append(slot)
        slot.count += 1
        return slot.count

    def ranking(self) -> List[Tuple[bytes, int]]:
        """Return ``(word, count)`` by descending count, then ascending word."""
        return _rank(
            (slot.word, slot.count)
            for _, bucket in sorted(self._buckets.items())
            for slot in bucket
        )


class SparseCounter:
    """Counts words keyed on the full hash with 24-bit wrapping counters."""

    default_seed = SPARSE_SEED

    def __init__(self) -> None:
        self._counts: Dict[int, int] = {}
        self._words: Dict[int, bytes] = {}

    def add(self, hash_value: int, word: Word) -> int:
        """Count one occurrence of the word with ``hash_value``.

        Returns the new count, which wraps to zero past 24 bits. The word
        is stored whenever the counter goes up from zero.
        """
        _check_hash(hash_value)
        previous = self._counts.get(hash_value, 0)
        if previous == 0:
            self._words[hash_value] = _as_bytes(word).lower()
        count = (previous + 1) & _COUNTER_MASK
        self._counts[hash_value] = count
        return count

    def ranking(self) -> List[Tuple[bytes, int]]:
        """Return ``(word, count)`` by descending count, then ascending word."""
        return _rank(
            (self._words[h], count)
            for h, count in sorted(self._counts.items())
            if count != 0
        )


def count_words_hashed(
    data: bytes,
    counter: Optional[Union[ChunkedHashTable, SparseCounter]] = None,
    seed: Optional[int] = None,
) -> Union[ChunkedHashTable, SparseCounter]:
    """Hash every lowercased word of ``data`` and count it in ``counter``.

    A new ``ChunkedHashTable`` is used when no counter is given, and the
    counter's own default seed when no seed is given.
    """
    if counter is None:
        counter = ChunkedHashTable()
    if seed is None:
        seed = counter.default_seed
    for word in iter_words(data):
        counter.add(crc32c(word, seed), word)
    return counter


def find_perfect_seeds(
    words: Iterable[Word],
    start: int = 0,
    stop: int = 2**31 - 1,
    max_collisions: int = SLOTS_PER_CHUNK,
) -> Iterator[int]:
    """Yield seeds in ``[start, stop)`` that hash ``words`` without collisions.

    A seed qualifies when every distinct word gets a distinct hash and no
    bucket of the chunked table receives more than ``max_collisions`` of
    them.
    """
    unique = sorted({_as_bytes(word) for word in words}, key=lambda w: (len(w), w))
    for seed in range(start, stop):
        hashes = set()
        bad = False
        for word in unique:
            value = crc32c(word, seed)
            if value in hashes:
                bad = True
                break
            hashes.add(value)
        if bad:
            continue
        buckets: Dict[int, int] = {}
        for value in hashes:
            low = value & TABLE_MASK
            buckets[low] = buckets.get(low, 0) + 1
            if buckets[low] > max_collisions:
                bad = True
                break
        if not bad:
            yield seed