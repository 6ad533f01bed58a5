from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from striptags.__main__ import main


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCommandLine(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_reads_standard_input(self) -> None:
        with mock.patch("sys.stdin", io.StringIO("<p>lorem <b>ipsum</b></p>")):
            code, out, err = _run([])
        assert code == 0
        assert out == "lorem ipsum"
        assert err == ""

    def test_strips_files_in_order(self) -> None:
        first = self.tmp / "first.html"
        second = self.tmp / "second.html"
        first.write_text("<h1>one</h1>\n", encoding="utf-8")
        second.write_text("<!-- skip --><p>two</p>\n", encoding="utf-8")
        code, out, _ = _run([str(first), str(second)])
        assert code == 0
        assert out == "one\ntwo\n"

    def test_undecodable_bytes_are_replaced(self) -> None:
        path = self.tmp / "bad.html"
        path.write_bytes(b"<p>caf\xe9</p>")
        code, out, _ = _run([str(path)])
        assert code == 0
        assert out == "caf\ufffd"

    def test_encoding_option(self) -> None:
        path = self.tmp / "latin.html"
        path.write_bytes(b"<p>caf\xe9</p>")
        code, out, _ = _run(["--encoding", "latin-1", str(path)])
        assert code == 0
        assert out == "café"

    def test_writes_output_file(self) -> None:
        source = self.tmp / "in.html"
        target = self.tmp / "out.txt"
        source.write_text("<i>x</i> < y", encoding="utf-8")
        code, out, _ = _run([str(source), "--output", str(target)])
        assert code == 0
        assert out == ""
        assert target.read_text(encoding="utf-8") == "x < y"

    def test_missing_file_is_an_error(self) -> None:
        code, out, err = _run([str(self.tmp / "missing.html")])
        assert code == 1
        assert out == ""
        assert err.startswith("ERROR: Cannot read")

    def test_unknown_encoding_is_an_error(self) -> None:
        code, _, err = _run(["--encoding", "no-such-codec"])
        assert code == 1
        assert "Unknown encoding" in err


if __name__ == "__main__":
    unittest.main()
