# wordfreq-bench

Counts how often each word occurs in a text and writes the words ranked by
count. Several counting strategies are included, so they can be timed against
each other on the same input and their results compared.

A word is a run of ASCII letters (`A`–`Z`, `a`–`z`); every other byte
separates words. Words are folded to lower case. Each output line is
`<count> <word>`. Lines are ordered by count, highest first, and words with
the same count are ordered alphabetically.

## Installation

```
pip install .
```

The package uses only the standard library. To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

```
wordfreq-bench in.txt out.txt
wordfreq-bench --method trie - -
```

Arguments and options:

- `input`: the file to read, or `-` for standard input.
- `output`: the file to write, or `-` for standard output.
- `--method`: the counting strategy, one of `chunked`, `hash` (the default),
  `ordered`, `sparse`, `trie`.
- `--limit`: the input must be shorter than this many bytes
  (default 536870912, that is 2**29).

The command writes the input size and the elapsed time of each stage to
standard error: `read input`, `count and sort words`, `write output`, and the
`total`. It exits with status 0 on success and 1 when a file cannot be
opened, the input reaches the limit, the `chunked` table overflows a bucket,
or the output cannot be written.

The methods:

- `hash`: a dictionary of word counts, sorted by count and then word.
- `ordered`: the same counts taken in word order, then stably sorted by count.
- `trie`: a letter trie walked in alphabetical order, then stably sorted by
  count.
- `chunked`: words identified by their CRC-32C hash (seed 10675) in a table
  of 2**17 buckets with 8 slots each.
- `sparse`: words identified by their full CRC-32C hash (seed 23) with
  24-bit counters.

The two hash-based methods never compare the words themselves: distinct words
whose hashes coincide are counted together under the first of them seen. Their
counts agree with the other methods only when the seed gives no collisions for
the input.

## Library

```python
import sys

from wordfreq_bench.counting import count_words, rank_words
from wordfreq_bench.textio import write_ranking

data = b"The cat and the hat. The end."
write_ranking(sys.stdout.buffer, rank_words(count_words(data)))
# 3 the
# 1 and
# 1 cat
# 1 end
# 1 hat
```

Rankings are lists of `(word, count)` pairs, with words as `bytes`.

### `wordfreq_bench.textio`

- `to_lower(data)`: lowercases ASCII letters and turns every other byte
  into NUL.
- `iter_words(data)`: yields the lowercased words of `data`.
- `read_input(source, limit)`: reads a binary stream; raises
  `InputTooLargeError` (a `ValueError`) when the data reaches `limit` bytes,
  and `ValueError` when `limit` is not positive.
- `format_ranking(ranking)`: renders `(word, count)` pairs as
  `b"count word\n"` lines; words may be `bytes` or ASCII `str`.
- `write_ranking(stream, ranking)`: writes those lines to a binary stream and
  flushes it.

### `wordfreq_bench.counting`

- `count_words(data)`: a `collections.Counter` of the words.
- `rank_words(counts)`: sorts by descending count, then ascending word.
- `rank_ordered(counts)`: takes the words in key order and stably sorts them
  by descending count.

### `wordfreq_bench.trie`

- `Trie`: `add(word)` counts one occurrence of a non-empty word of the
  letters `a`–`z` and returns its new count (raising `ValueError` for
  anything else); `items()` yields `(word, count)` in alphabetical order;
  `len()` is the number of distinct words; `node_count` is the number of
  nodes, the root included.
- `count_words_trie(data)`: builds a `Trie` from the words of `data`.
- `rank_trie(data)`: the ranking of `data` by descending count, ties in
  alphabetical order.

### `wordfreq_bench.hashing`

- `crc32c(data, seed)`: folds bytes into a CRC-32C accumulator with no
  initial or final inversion.
- `ChunkedHashTable`: `add(hash_value, word)` counts a word under its hash,
  split into a 17-bit bucket index and a tag; raises `HashCollisionError`
  when a ninth distinct tag lands in one bucket. `ranking()` returns the
  ranking.
- `SparseCounter`: `add(hash_value, word)` counts a word under its full hash
  with a counter that wraps to zero past 24 bits; `ranking()` leaves out
  counters that are zero.
- `count_words_hashed(data, counter, seed)`: hashes every word of `data` and
  adds it to `counter` (a new `ChunkedHashTable` by default), using the
  counter's default seed when none is given.
- `find_perfect_seeds(words, start, stop, max_collisions)`: yields the seeds
  in `[start, stop)` under which all distinct words get distinct hashes and
  no bucket receives more than `max_collisions` of them (default 8). The
  search is single-threaded and is not offered on the command line.

### `wordfreq_bench.timer`

`Timer(label, stream, clock)` measures elapsed seconds. `dt()` returns the
time since the previous lap and starts a new one; `dt(absolute=True)` returns
the time since creation. `report(description)` writes
`time (<description>) = <seconds>` to the stream (standard error by default).
Used as a context manager, it reports the total under `label` on exit.