"""Reading input text, splitting it into words and writing rankings."""

from __future__ import annotations

import re
from typing import BinaryIO, Iterable, Iterator, Tuple, Union

DEFAULT_INPUT_LIMIT = 1 << 29

Word = Union[bytes, str]
Ranking = Iterable[Tuple[Word, int]]

_WORD = re.compile(rb"[A-Za-z]+")

# ASCII letters become lowercase letters, every other byte becomes NUL.
_LOWER_TABLE = bytes(
    (c | 0x20) if (0x41 <= c <= 0x5A or 0x61 <= c <= 0x7A) else 0
    for c in range(256)
)


class InputTooLargeError(ValueError):
    """Raised when the input does not fit within the read limit."""


def to_lower(data: bytes) -> bytes:
    """Lowercase ASCII letters and replace every other byte with NUL."""
    return bytes(data).translate(_LOWER_TABLE)


def iter_words(data: bytes) -> Iterator[bytes]:
    """Yield the lowercased runs of ASCII letters in ``data``."""
    for match in _WORD.finditer(data):
        yield match.group().lower()


def read_input(source: BinaryIO, limit: int = DEFAULT_INPUT_LIMIT) -> bytes:
    """Read all of ``source``; it must be strictly shorter than ``limit``."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    data = source.read(limit)
    if len(data) >= limit:
        raise InputTooLargeError("input is too large")
    return data


def _iter_lines(ranking: Ranking) -> Iterator[bytes]:
    for word, count in ranking:
        if isinstance(word, str):
            word = word.encode("ascii")
        yield b"%d %s\n" % (count, word)


def format_ranking(ranking: Ranking) -> bytes:
    """Render ``(word, count)`` pairs as ``"count word"`` lines."""
    return b"".join(_iter_lines(ranking))


def write_ranking(stream: BinaryIO, ranking: Ranking) -> None:
    """Write ``(word, count)`` pairs to a binary stream, one per line."""
    stream.writelines(_iter_lines(ranking))
    stream.flush()