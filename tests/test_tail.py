"""Tests for tail."""

import pytest

from unixtools.tail import TakeValue, get_start_index, main, new_argv, parse_num


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3", TakeValue(False, 3)),
        ("-3", TakeValue(False, 3)),
        ("+3", TakeValue(True, 3)),
        ("0", TakeValue(False, 0)),
        ("+0", TakeValue(True, 0)),
        ("9223372036854775808", TakeValue(False, 9223372036854775808)),
    ],
)
def test_parse_num(value, expected):
    assert parse_num(value) == expected


@pytest.mark.parametrize("value", ["3.14", "foo", "", "+", "--3"])
def test_parse_num_rejects(value):
    with pytest.raises(ValueError) as excinfo:
        parse_num(value)
    assert str(excinfo.value) == value


def test_get_start_index():
    assert get_start_index(TakeValue(True, 0), 0) is None
    assert get_start_index(TakeValue(True, 0), 1) == 0
    assert get_start_index(TakeValue(False, 0), 1) is None
    assert get_start_index(TakeValue(True, 1), 0) is None
    assert get_start_index(TakeValue(True, 2), 1) is None
    assert get_start_index(TakeValue(True, 1), 10) == 0
    assert get_start_index(TakeValue(True, 2), 10) == 1
    assert get_start_index(TakeValue(True, 3), 10) == 2
    assert get_start_index(TakeValue(False, 1), 10) == 9
    assert get_start_index(TakeValue(False, 2), 10) == 8
    assert get_start_index(TakeValue(False, 3), 10) == 7
    assert get_start_index(TakeValue(False, 20), 10) == 0


def test_new_argv_translates_historic_numbers():
    assert new_argv(["-3", "f"]) == ["-n-3", "f"]
    assert new_argv(["+3", "f"]) == ["-n+3", "f"]
    assert new_argv(["-n", "-3", "f"]) == ["-n", "-3", "f"]
    assert new_argv(["-q", "--", "-3"]) == ["-q", "--", "-3"]


@pytest.fixture
def ten(tmp_path):
    path = tmp_path / "ten.txt"
    path.write_text("".join(f"{i}\n" for i in range(1, 11)))
    return path


def test_tail_defaults_to_last_ten_lines(run, tmp_path):
    path = tmp_path / "twelve.txt"
    path.write_text("".join(f"{i}\n" for i in range(1, 13)))
    code, out, _ = run(main, [str(path)])
    assert code == 0
    assert out.splitlines() == [str(i) for i in range(3, 13)]


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["-n", "3"], "8\n9\n10\n"),
        (["-n", "-3"], "8\n9\n10\n"),
        (["-n", "+8"], "8\n9\n10\n"),
        (["-n", "+0"], "".join(f"{i}\n" for i in range(1, 11))),
        (["-n", "0"], ""),
        (["-n", "+20"], ""),
        (["-2"], "9\n10\n"),
        (["-c", "3"], "10\n"),
        (["-c", "+19"], "10\n"),
    ],
)
def test_tail_locations(run, ten, argv, expected):
    _, out, _ = run(main, argv + [str(ten)])
    assert out == expected


def test_tail_bytes_decode_lossily(run, tmp_path):
    path = tmp_path / "accent.txt"
    path.write_text("ábc", encoding="utf-8")
    _, out, _ = run(main, ["-c", "3", str(path)])
    assert out == "\ufffdbc"


def test_tail_keeps_carriage_returns_inside_lines(run, tmp_path):
    path = tmp_path / "cr.txt"
    path.write_bytes(b"a\rb\nc\n")
    _, out, _ = run(main, ["-n", "1", str(path)])
    assert out == "c\n"


def test_tail_headers_and_quiet(run, ten, inputs):
    fox = inputs / "fox.txt"
    _, out, _ = run(main, ["-n", "1", str(ten), str(fox)])
    assert out == f"==> {ten} <==\n10\n\n==> {fox} <==\nThe quick brown fox jumps over the lazy dog.\n"

    _, out, _ = run(main, ["-q", "-n", "1", str(ten), str(fox)])
    assert out == "10\nThe quick brown fox jumps over the lazy dog.\n"


@pytest.mark.parametrize("option, message", [("-n", "illegal line count -- x"), ("-c", "illegal byte count -- x")])
def test_tail_rejects_bad_numbers(run, ten, option, message):
    code, _, err = run(main, [option, "x", str(ten)])
    assert code == 1
    assert err == f"tail: {message}\n"


def test_tail_missing_file_continues(run, ten, tmp_path):
    code, out, err = run(main, ["-q", "-n", "1", str(tmp_path / "nope"), str(ten)])
    assert code == 1
    assert "nope: No such file or directory" in err
    assert out == "10\n"


def test_tail_accepts_stdin_twice(run, stdin):
    stdin("x\n")
    code, out, _ = run(main, ["-q", "-", "-"])
    assert code == 0
    assert out == "x\n"
