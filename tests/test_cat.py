"""Tests for cat."""

from unixtools.cat import main, number_lines


def test_number_lines_numbers_every_line():
    assert list(number_lines(["a\n", "\n", "b\n"])) == ["     1\ta", "     2\t", "     3\tb"]


def test_number_lines_skips_blank_lines_when_asked():
    assert list(number_lines(["a\n", "\n", "b"], nonblank_only=True)) == ["     1\ta", "", "     2\tb"]


def test_cat_copies_files_verbatim(run, inputs):
    code, out, err = run(main, [str(inputs / "fox.txt"), str(inputs / "empty.txt")])
    assert code == 0
    assert out == "The quick brown fox jumps over the lazy dog.\n"
    assert err == ""


def test_cat_numbers_lines_per_file(run, tmp_path):
    first = tmp_path / "first.txt"
    first.write_text("one\ntwo\n")
    second = tmp_path / "second.txt"
    second.write_text("three\n")
    _, out, _ = run(main, ["-n", str(first), str(second)])
    assert out == "     1\tone\n     2\ttwo\n     1\tthree\n"


def test_cat_reads_stdin(run, stdin):
    stdin("x\n\ny\n")
    _, out, _ = run(main, ["-b"])
    assert out == "     1\tx\n\n     2\ty\n"


def test_cat_number_options_are_exclusive(run, inputs):
    code, _, _ = run(main, ["-n", "-b", str(inputs / "fox.txt")])
    assert code == 2


def test_cat_reports_missing_file_and_continues(run, inputs):
    code, out, err = run(main, [str(inputs / "nope.txt"), str(inputs / "fox.txt")])
    assert code == 1
    assert err.startswith("cat: ")
    assert "nope.txt: No such file or directory" in err
    assert out == "The quick brown fox jumps over the lazy dog.\n"


def test_cat_accepts_stdin_twice(run, stdin):
    stdin("x\n")
    code, out, err = run(main, ["-", "-"])
    assert code == 0
    assert err == ""
    assert out == "x\n"
