"""Tests for uniq."""

from unixtools.uniq import collapse, format_run, main


def test_collapse_groups_adjacent_lines_only():
    lines = ["a\n", "a\n", "b\n", "a\n"]
    assert list(collapse(lines)) == [(2, "a\n"), (1, "b\n"), (1, "a\n")]


def test_collapse_ignores_missing_final_newline():
    assert list(collapse(["a\n", "a"])) == [(2, "a\n")]


def test_collapse_empty_input():
    assert list(collapse([])) == []


def test_format_run():
    assert format_run(3, "c\n", True) == "   3 c\n"
    assert format_run(3, "c\n", False) == "c\n"


def test_uniq_file(run, inputs):
    code, out, _ = run(main, [str(inputs / "repeats.txt")])
    assert code == 0
    assert out == "a\nb\nc\na\n"


def test_uniq_counts(run, inputs):
    _, out, _ = run(main, ["-c", str(inputs / "repeats.txt")])
    assert out == "   2 a\n   1 b\n   3 c\n   1 a\n"


def test_uniq_writes_output_file(run, inputs, tmp_path):
    target = tmp_path / "out.txt"
    _, out, _ = run(main, [str(inputs / "repeats.txt"), str(target)])
    assert out == ""
    assert target.read_text() == "a\nb\nc\na\n"


def test_uniq_reads_stdin(run, stdin):
    stdin("x\nx\n")
    _, out, _ = run(main, ["-c"])
    assert out == "   2 x\n"


def test_uniq_missing_input(run, inputs):
    code, _, err = run(main, [str(inputs / "nope.txt")])
    assert code == 1
    assert err.startswith("uniq: ")
