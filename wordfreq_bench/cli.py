"""Command line entry point: count the words of a file and rank them."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from typing import BinaryIO, Callable, Dict, List, Optional, Sequence, Tuple

from .counting import count_words, rank_ordered, rank_words
from .hashing import (
    ChunkedHashTable,
    HashCollisionError,
    SparseCounter,
    count_words_hashed,
)
from .textio import DEFAULT_INPUT_LIMIT, InputTooLargeError, read_input, write_ranking
from .timer import Timer
from .trie import rank_trie

Ranking = List[Tuple[bytes, int]]


def _rank_hash(data: bytes) -> Ranking:
    return rank_words(count_words(data))


def _rank_ordered(data: bytes) -> Ranking:
    return rank_ordered(count_words(data))


def _rank_chunked(data: bytes) -> Ranking:
    return count_words_hashed(data, ChunkedHashTable()).ranking()


def _rank_sparse(data: bytes) -> Ranking:
    return count_words_hashed(data, SparseCounter()).ranking()


METHODS: Dict[str, Callable[[bytes], Ranking]] = {
    "hash": _rank_hash,
    "ordered": _rank_ordered,
    "trie": rank_trie,
    "chunked": _rank_chunked,
    "sparse": _rank_sparse,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordfreq",
        description="Count the words of a text and rank them by frequency.",
    )
    parser.add_argument("input", help="input file, or - for standard input")
    parser.add_argument("output", help="output file, or - for standard output")
    parser.add_argument(
        "--method",
        choices=sorted(METHODS),
        default="hash",
        help="counting strategy (default: hash)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_INPUT_LIMIT,
        help="input must be shorter than this many bytes",
    )
    return parser


def _error(message: str) -> int:
    sys.stderr.write(message + "\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the word counter; return the process exit status."""
    args = _build_parser().parse_args(argv)
    rank = METHODS[args.method]

    with Timer(stream=sys.stderr) as timer, ExitStack() as stack:
        source: BinaryIO
        target: BinaryIO
        if args.input == "-":
            source = sys.stdin.buffer
        else:
            try:
                source = stack.enter_context(open(args.input, "rb"))
            except OSError:
                return _error(f"failed to open '{args.input}' file to read")

        if args.output == "-":
            target = sys.stdout.buffer
        else:
            try:
                target = stack.enter_context(open(args.output, "wb"))
            except OSError:
                return _error(f"failed to open '{args.output}' file to write")

        try:
            data = read_input(source, args.limit)
        except InputTooLargeError as error:
            return _error(str(error))
        except ValueError as error:
            return _error(str(error))
        sys.stderr.write(f"input size = {len(data)} bytes\n")
        timer.report("read input")

        try:
            ranking = rank(data)
        except HashCollisionError as error:
            return _error(str(error))
        timer.report("count and sort words")

        try:
            write_ranking(target, ranking)
        except OSError:
            return _error("output failure")
        timer.report("write output")

    return 0


if __name__ == "__main__":
    sys.exit(main())