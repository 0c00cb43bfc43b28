#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the sextet CLI commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
import pytest

from sextet.cli import cli, run
from sextet.exceptions import DestinationWriteError


class TestEncodeCommand:
    """Test 'sextet encode'."""

    def test_encode_file(self, binary_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["encode", str(binary_file)])

        assert result.exit_code == 0, result.output
        assert "Encoded Base64 string:" in result.output
        assert "TWFueSBoYW5kcyBtYWtlIGxpZ2h0IHdvcmsu" in result.output

    def test_encode_missing_file(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["encode", str(tmp_path / "missing.bin")])

        assert result.exit_code == 1
        assert "Error opening file for reading" in result.output


class TestDecodeCommand:
    """Test 'sextet decode'."""

    def test_decode_literal_to_default_output(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["decode", "TWFu"])

            assert result.exit_code == 0, result.output
            assert "Decoded binary file saved as: output.bin" in result.output
            assert Path("output.bin").read_bytes() == b"Man"

    def test_decode_file_to_explicit_output(self, tmp_path: Path) -> None:
        source = tmp_path / "encoded.txt"
        source.write_text("TWE=\n")
        output = tmp_path / "decoded.bin"

        runner = CliRunner()
        result = runner.invoke(cli, ["decode", str(source), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_bytes() == b"Ma"

    def test_decode_output_from_env(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["decode", "TQ=="], env={"SEXTET_OUTPUT": "from-env.bin"})

            assert result.exit_code == 0, result.output
            assert Path("from-env.bin").read_bytes() == b"M"

    def test_decode_replaces_existing_output(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("output.bin").write_bytes(b"stale")
            result = runner.invoke(cli, ["decode", "TWFu"])

            assert result.exit_code == 0, result.output
            assert Path("output.bin").read_bytes() == b"Man"

    def test_decode_invalid_symbol(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["decode", "A!=="])

            assert result.exit_code == 1
            assert "Invalid Base64 character '!' at position 1" in result.output
            assert not Path("output.bin").exists()

    def test_decode_write_failure(self, tmp_path: Path) -> None:
        runner = CliRunner()
        with patch(
            "sextet.commands.decode.decode_to_file",
            side_effect=DestinationWriteError("Error opening file for writing", tmp_path / "out.bin"),
        ):
            result = runner.invoke(cli, ["decode", "TWFu", "-o", str(tmp_path / "out.bin")])

        assert result.exit_code == 1
        assert "Error opening file for writing" in result.output


class TestXorCommand:
    """Test 'sextet xor'."""

    def test_xor_with_key(self, tmp_path: Path) -> None:
        source = tmp_path / "data.bin"
        source.write_bytes(b"\x00\x01")

        runner = CliRunner()
        result = runner.invoke(cli, ["xor", str(source), "--key", "A"])

        assert result.exit_code == 0, result.output
        assert "{ 0x41, 0x40 };" in result.output

    def test_xor_default_key(self, tmp_path: Path) -> None:
        source = tmp_path / "data.bin"
        source.write_bytes(b"\x00")

        runner = CliRunner()
        result = runner.invoke(cli, ["xor", str(source)])

        assert result.exit_code == 0, result.output
        assert "{ 0x6d };" in result.output

    def test_xor_key_from_env(self, tmp_path: Path) -> None:
        source = tmp_path / "data.bin"
        source.write_bytes(b"\x00")

        runner = CliRunner()
        result = runner.invoke(cli, ["xor", str(source)], env={"SEXTET_XOR_KEY": "z"})

        assert result.exit_code == 0, result.output
        assert "{ 0x7a };" in result.output

    def test_xor_empty_key(self, tmp_path: Path) -> None:
        source = tmp_path / "data.bin"
        source.write_bytes(b"\x00")

        runner = CliRunner()
        result = runner.invoke(cli, ["xor", str(source), "--key", ""])

        assert result.exit_code != 0
        assert "must not be empty" in result.output


class TestExitStatus:
    """Test run(), which maps every failure to exit status 1."""

    def test_success(self, binary_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["encode", str(binary_file)]) == 0
        assert "TWFueSBoYW5kcyBtYWtlIGxpZ2h0IHdvcmsu" in capsys.readouterr().out

    def test_missing_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["encode"]) == 1
        assert "Usage:" in capsys.readouterr().err

    def test_extra_argument(self, binary_file: Path) -> None:
        assert run(["encode", str(binary_file), "extra"]) == 1

    def test_unknown_operation(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["compress", "file.bin"]) == 1
        assert "No such command" in capsys.readouterr().err

    def test_decode_failure(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert run(["decode", "TW~u"]) == 1

    def test_no_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run([]) == 1
        assert "Usage:" in capsys.readouterr().err

    def test_invalid_log_level_from_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SEXTET_LOG_LEVEL", "loud")
        assert run(["decode", "TWFu"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
        assert not (tmp_path / "output.bin").exists()

    def test_invalid_log_level_with_runner(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["decode", "TWFu"], env={"SEXTET_LOG_LEVEL": "loud"})

            assert result.exit_code != 0
            assert "Invalid log level: loud" in result.output
            assert not Path("output.bin").exists()

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["--version"]) == 0
        assert "sextet version" in capsys.readouterr().out


# 🌶️📦🔚
