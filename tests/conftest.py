import io
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

INPUTS = ROOT / "tests" / "inputs"


@pytest.fixture
def run(capsys):
    """Calls a tool's main(argv) and returns (exit_code, stdout, stderr)."""

    def _run(main, argv):
        try:
            main(argv)
            code = 0
        except SystemExit as exc:
            code = 0 if exc.code is None else exc.code
        out, err = capsys.readouterr()
        return code, out, err

    return _run


@pytest.fixture
def stdin(monkeypatch):
    """Replaces sys.stdin with the given text or bytes."""

    def _set(data):
        if isinstance(data, str):
            data = data.encode("utf-8")
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))

    return _set


@pytest.fixture
def inputs():
    return INPUTS
