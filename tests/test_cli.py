"""Tests for the padthai command-line interface."""

import os

import pytest

from padthai.api.cli import create_parser, wrap_lines
from padthai.core.codec import encode

pytestmark = pytest.mark.cli


class TestEncodeCommand:
    def test_encode_stdin(self, run_cli):
        status, out, err = run_cli([], b"\x00\x01\x02")
        assert status == 0
        assert out.decode("utf-8") == encode(b"\x00\x01\x02")
        assert err == ""

    def test_encode_empty(self, run_cli):
        status, out, _ = run_cli([], b"")
        assert status == 0
        assert out == b""

    def test_encode_file(self, run_cli, tmp_path):
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\xde\xad\xbe\xef")
        status, out, _ = run_cli([str(path)])
        assert status == 0
        assert out.decode("utf-8") == encode(b"\xde\xad\xbe\xef")

    def test_encode_wrap(self, run_cli):
        status, out, _ = run_cli(["-w", "4"], b"\x01\x02\x03\x04\x05")
        text = out.decode("utf-8")
        assert status == 0
        assert text.endswith("\n")
        assert all(len(line) <= 4 for line in text.splitlines())
        assert "".join(text.split()) == encode(b"\x01\x02\x03\x04\x05")

    def test_wrap_from_environment(self, run_cli, monkeypatch):
        monkeypatch.setenv("PADTHAI_WRAP", "3")
        status, out, _ = run_cli([], b"\x01\x02\x03\x04")
        assert status == 0
        assert out.decode("utf-8").count("\n") == 2

    def test_missing_file(self, run_cli, tmp_path):
        status, out, err = run_cli([str(tmp_path / "nope.bin")])
        assert status == 1
        assert out == b""
        assert err.startswith("padthai: read error:")


class TestDecodeCommand:
    def test_decode_stdin(self, run_cli):
        text = encode(b"hello, world")
        status, out, err = run_cli(["-d"], text.encode("utf-8"))
        assert status == 0
        assert out == b"hello, world"
        assert err == ""

    def test_decode_wrapped_input(self, run_cli):
        data = os.urandom(99)
        text = wrap_lines(encode(data), 10)
        status, out, _ = run_cli(["--decode"], text.encode("utf-8"))
        assert status == 0
        assert out == data

    def test_decode_invalid_character(self, run_cli):
        status, out, err = run_cli(["-d"], b"XYZ")
        assert status == 1
        assert out == b""
        assert err.strip() == "padthai: decode error: invalid character U+0058 at position 0"

    def test_decode_invalid_length(self, run_cli):
        text = encode(b"\x42\x43")[:2]
        status, _, err = run_cli(["-d"], text.encode("utf-8"))
        assert status == 1
        assert "not a multiple of 3" in err

    def test_decode_invalid_utf8(self, run_cli):
        status, _, err = run_cli(["-d"], b"\xff\xfe")
        assert status == 1
        assert err.startswith("padthai: decode error:")

    def test_roundtrip_through_cli(self, run_cli):
        data = os.urandom(257)
        _, encoded, _ = run_cli(["-w", "76"], data)
        status, decoded, _ = run_cli(["-d"], encoded)
        assert status == 0
        assert decoded == data


class TestParser:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PADTHAI_WRAP", raising=False)
        args = create_parser().parse_args([])
        assert args.decode is False
        assert args.wrap == 0
        assert args.file is None

    def test_negative_wrap_rejected(self, run_cli):
        with pytest.raises(SystemExit) as exc:
            run_cli(["-w", "-1"])
        assert exc.value.code == 2


class TestWrapLines:
    def test_no_wrap(self):
        assert wrap_lines("abcdef", 0) == "abcdef"

    def test_empty(self):
        assert wrap_lines("", 4) == ""

    def test_exact_multiple(self):
        assert wrap_lines("abcdef", 3) == "abc\ndef\n"

    def test_remainder(self):
        assert wrap_lines("abcdefg", 3) == "abc\ndef\ng\n"
