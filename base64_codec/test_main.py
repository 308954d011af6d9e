#!/usr/bin/env python3
"""
Base64 Codec - Command Line Tests

Drives main() with stdin/stdout replaced by in-memory binary streams.
"""

import io
import sys

import pytest
from hypothesis import given, strategies as st, settings, HealthCheck

from .main import (
    EXIT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    create_argument_parser,
    create_config_from_args,
    main,
    run,
)
from .models import CodecConfig, CodecMode


def run_cli(monkeypatch, argv, stdin_bytes=b""):
    """Run main() and return (exit code, stdout bytes)"""
    stdin = io.TextIOWrapper(io.BytesIO(stdin_bytes))
    stdout = io.TextIOWrapper(io.BytesIO())
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    code = main(argv)
    return code, stdout.buffer.getvalue()


class TestArgumentParser:
    """Parser and config mapping"""

    def test_subcommand_required(self):
        """Test a missing subcommand is a usage error"""
        with pytest.raises(SystemExit) as exc_info:
            create_argument_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_unknown_subcommand(self):
        """Test an unknown subcommand is a usage error"""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["compress"])

    def test_encode_defaults(self):
        """Test encode without options"""
        args = create_argument_parser().parse_args(["encode"])
        config = create_config_from_args(args)
        assert config == CodecConfig(mode=CodecMode.ENCODE)

    def test_decode_options(self):
        """Test every decode option maps to the config"""
        args = create_argument_parser().parse_args(
            ["-v", "decode", "--strict", "-s", "-f", "in.b64", "-o", "out.bin"]
        )
        config = create_config_from_args(args)
        assert config.mode is CodecMode.DECODE
        assert config.strict is True
        assert config.strip is True
        assert config.input_file == "in.b64"
        assert config.output_file == "out.bin"
        assert config.log_level == "DEBUG"

    def test_quiet_sets_error_level(self):
        """Test -q and encode -n"""
        args = create_argument_parser().parse_args(["-q", "encode", "-n"])
        config = create_config_from_args(args)
        assert config.log_level == "ERROR"
        assert config.newline is True

    def test_verbose_and_quiet_are_exclusive(self):
        """Test -v with -q is a usage error"""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["-v", "-q", "encode"])


class TestMainStdio:
    """stdin -> stdout"""

    @pytest.mark.parametrize("raw, encoded", [
        (b"", b""),
        (b"A", b"QQ=="),
        (b"AB", b"QUI="),
        (b"ABC", b"QUJD"),
        (b"ABCD", b"QUJDRA=="),
    ])
    def test_encode_and_decode(self, monkeypatch, raw, encoded):
        """Test known vectors in both directions"""
        assert run_cli(monkeypatch, ["encode"], raw) == (EXIT_OK, encoded)
        assert run_cli(monkeypatch, ["decode"], encoded) == (EXIT_OK, raw)

    def test_binary_input_is_not_altered(self, monkeypatch):
        """Test every byte value survives a round trip"""
        raw = bytes(range(256))
        code, encoded = run_cli(monkeypatch, ["encode"], raw)
        assert code == EXIT_OK
        assert run_cli(monkeypatch, ["decode"], encoded) == (EXIT_OK, raw)

    def test_undecodable_text_argument(self, monkeypatch):
        """Test a non-UTF-8 argv byte is encoded as-is"""
        assert run_cli(monkeypatch, ["encode", "\udcff"]) == (EXIT_OK, b"/w==")

    def test_encode_text_argument_with_newline(self, monkeypatch):
        """Test literal text with a trailing newline"""
        assert run_cli(monkeypatch, ["encode", "Hello World", "-n"]) == (
            EXIT_OK, b"SGVsbG8gV29ybGQ=\n"
        )

    def test_decode_strip(self, monkeypatch):
        """Test --strip removes surrounding whitespace"""
        assert run_cli(monkeypatch, ["decode", "--strip"], b"  QUJD\n") == (EXIT_OK, b"ABC")

    def test_lenient_decode_warns(self, monkeypatch, capsys):
        """Test lenient decoding logs a warning"""
        code, out = run_cli(monkeypatch, ["decode"], b"QQ==\n")
        assert code == EXIT_OK
        assert out == b"A" + b"\x00" * 5
        err = capsys.readouterr().err
        assert "WARNING" in err
        assert "3 non-Base64 byte(s)" in err
        assert "'=' at offset 2" in err

    def test_quiet_suppresses_warning(self, monkeypatch, capsys):
        """Test -q hides the lenient warning"""
        run_cli(monkeypatch, ["-q", "decode"], b"QQ==\n")
        assert capsys.readouterr().err == ""

    def test_strict_decode_fails(self, monkeypatch, capsys):
        """Test --strict exits with an error"""
        code, out = run_cli(monkeypatch, ["decode", "--strict"], b"QQ==\n")
        assert code == EXIT_ERROR
        assert out == b""
        assert "malformed input" in capsys.readouterr().err


class TestMainFiles:
    """--file / --output"""

    def test_file_round_trip(self, monkeypatch, tmp_path):
        """Test encode and decode through files"""
        source = tmp_path / "data.bin"
        encoded = tmp_path / "data.b64"
        restored = tmp_path / "restored.bin"
        source.write_bytes(b"\x89PNG\r\n\x1a\n")

        assert run_cli(monkeypatch, ["encode", "-f", str(source), "-o", str(encoded)]) == (EXIT_OK, b"")
        assert encoded.read_bytes() == b"iVBORw0KGgo="
        assert run_cli(monkeypatch, ["decode", "-f", str(encoded), "-o", str(restored)]) == (EXIT_OK, b"")
        assert restored.read_bytes() == source.read_bytes()

    def test_missing_input_file(self, monkeypatch, tmp_path, capsys):
        """Test a missing input file"""
        code, _ = run_cli(monkeypatch, ["encode", "-f", str(tmp_path / "nope")])
        assert code == EXIT_ERROR
        assert "read error" in capsys.readouterr().err

    def test_unwritable_output(self, monkeypatch, tmp_path, capsys):
        """Test an output path that is a directory"""
        code, _ = run_cli(monkeypatch, ["encode", "x", "-o", str(tmp_path)])
        assert code == EXIT_ERROR
        assert "write error" in capsys.readouterr().err

    def test_text_and_file_conflict(self, monkeypatch, tmp_path, capsys):
        """Test text with --file is rejected"""
        code, _ = run_cli(monkeypatch, ["encode", "x", "-f", str(tmp_path / "in")])
        assert code == EXIT_ERROR
        assert "invalid options" in capsys.readouterr().err


class TestRun:
    """run() with explicit streams"""

    def test_returns_result(self):
        """Test run() returns the codec result"""
        stdout = io.BytesIO()
        result = run(CodecConfig(mode=CodecMode.DECODE), stdin=io.BytesIO(b"QUI="), stdout=stdout)
        assert result.data == b"AB"
        assert result.input_size == 4
        assert stdout.getvalue() == b"AB"

    def test_keyboard_interrupt(self, monkeypatch):
        """Test Ctrl-C exits with 130"""
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(sys.modules["base64_codec.main"], "run", interrupted)
        code, _ = run_cli(monkeypatch, ["encode"], b"x")
        assert code == EXIT_INTERRUPTED

    def test_unexpected_error_reported(self, monkeypatch, capsys):
        """Test an unexpected exception exits with 1 instead of a traceback"""
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(sys.modules["base64_codec.main"], "run", broken)
        code, _ = run_cli(monkeypatch, ["encode"], b"x")
        assert code == EXIT_ERROR
        assert "unexpected error: boom" in capsys.readouterr().err


@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(data=st.binary(max_size=256))
def test_property_cli_round_trip(monkeypatch, data: bytes):
    """encode | decode through the CLI returns the original bytes"""
    code, encoded = run_cli(monkeypatch, ["-q", "encode"], data)
    assert code == EXIT_OK
    code, decoded = run_cli(monkeypatch, ["-q", "decode"], encoded)
    assert code == EXIT_OK
    assert decoded == data
