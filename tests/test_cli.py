import io
import sys

import pytest

from wordfreq_bench.cli import METHODS, main
from wordfreq_bench.counting import count_words, rank_words
from wordfreq_bench.textio import format_ranking

SAMPLE = b"The quick brown fox, the lazy dog; THE fox and a dog.\nA fox!"


def _run(tmp_path, data, *extra):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(data)
    status = main([str(src), str(dst), *extra])
    return status, dst.read_bytes() if dst.exists() else None


def test_worked_example(tmp_path):
    status, out = _run(tmp_path, b"the cat The dog the cat")
    assert status == 0
    assert out == b"3 the\n2 cat\n1 dog\n"


def test_hash_output_matches_library_ranking(tmp_path):
    status, out = _run(tmp_path, SAMPLE)
    assert status == 0
    assert out == format_ranking(rank_words(count_words(SAMPLE)))


@pytest.mark.parametrize("method", sorted(METHODS))
def test_all_methods_agree(tmp_path, method):
    status, out = _run(tmp_path, SAMPLE, "--method", method)
    assert status == 0
    assert out == format_ranking(rank_words(count_words(SAMPLE)))


def test_non_letters_separate_words(tmp_path):
    data = b"ab1cd\xffAB cd--ef"
    status, out = _run(tmp_path, data)
    assert status == 0
    lines = out.splitlines()
    assert lines[0] in (b"2 ab", b"2 cd")
    assert out == format_ranking(rank_words(count_words(data)))


def test_empty_input_gives_empty_output(tmp_path):
    status, out = _run(tmp_path, b"")
    assert status == 0
    assert out == b""


def test_stdin_and_stdout(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(SAMPLE)))
    status = main(["-", "-"])
    captured = capsysbinary.readouterr()
    assert status == 0
    assert captured.out == format_ranking(rank_words(count_words(SAMPLE)))


def test_missing_input_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    status = main([str(missing), str(tmp_path / "out.txt")])
    assert status == 1
    assert "failed to open" in capsys.readouterr().err


def test_unwritable_output(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_bytes(SAMPLE)
    status = main([str(src), str(tmp_path / "no" / "dir" / "out.txt")])
    assert status == 1
    assert "file to write" in capsys.readouterr().err


def test_input_too_large(tmp_path, capsys):
    status, _ = _run(tmp_path, b"abcdef", "--limit", "6")
    assert status == 1
    assert "input is too large" in capsys.readouterr().err


def test_input_just_under_limit(tmp_path):
    status, out = _run(tmp_path, b"abcdef", "--limit", "7")
    assert status == 0
    assert out == b"1 abcdef\n"


def test_timer_reports_total(tmp_path, capsys):
    status, _ = _run(tmp_path, SAMPLE)
    err = capsys.readouterr().err
    assert status == 0
    assert "time (total) = " in err
    assert "time (read input) = " in err


def test_missing_arguments_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["only-one"])
    assert info.value.code == 2


def test_unknown_method_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "a"), str(tmp_path / "b"), "--method", "bogus"])
    assert info.value.code == 2