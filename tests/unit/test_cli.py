"""Unit tests for numconv.cli — the click application and error messages."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from numconv.cli.main import cli
from numconv.cli.messages import error_message
from numconv.grammar import Notation
from numconv.result import ConversionError, ErrorKind


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    package_logger = logging.getLogger("numconv")
    level, handlers = package_logger.level, list(package_logger.handlers)
    yield
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


class TestErrorMessages:
    def test_empty_input(self) -> None:
        error = ConversionError(kind=ErrorKind.EMPTY_INPUT, notation=Notation.DECIMAL)
        assert error_message(error) == "Please enter a number"

    def test_invalid_roman(self) -> None:
        error = ConversionError(kind=ErrorKind.INVALID_ROMAN, notation=Notation.ROMAN)
        assert error_message(error) == "Invalid Roman numeral"

    def test_invalid_digit_names_notation(self) -> None:
        error = ConversionError(kind=ErrorKind.INVALID_DIGIT, notation=Notation.HEXADECIMAL)
        assert error_message(error) == "Invalid Hexadecimal number"


class TestConvertCommand:
    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "255", "--base", "10"])
        assert result.exit_code == 0
        for expected in ("255", "11111111", "377", "FF", "CCLV"):
            assert expected in result.output

    def test_default_base_is_decimal(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "14"])
        assert result.exit_code == 0
        assert "XIV" in result.output

    def test_roman_base_case_insensitive(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "xiv", "--base", "ROMAN"])
        assert result.exit_code == 0
        assert "1110" in result.output

    def test_out_of_range_sentinel(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "4000"])
        assert result.exit_code == 0
        assert "Out of range (1-3999)" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["convert", "--value", "XIV", "--base", "roman", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["hexadecimal"] == "E"
        assert data["decimal"] == "14"

    def test_invalid_digit_exits_non_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "G", "--base", "16"])
        assert result.exit_code == 1
        assert "Invalid Hexadecimal number" in result.output

    def test_empty_value_exits_non_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "  "])
        assert result.exit_code == 1
        assert "Please enter a number" in result.output

    def test_invalid_roman_exits_non_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "IIII", "--base", "roman"])
        assert result.exit_code == 1
        assert "Invalid Roman numeral" in result.output

    def test_error_in_json_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["convert", "--value", "9", "--base", "8", "--format", "json"]
        )
        assert result.exit_code == 1
        assert '"INVALID_DIGIT"' in result.output

    def test_format_from_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["convert", "--value", "255"], env={"NUMCONV_FORMAT": "yaml"}
        )
        assert result.exit_code == 0
        assert "hexadecimal: FF" in result.output

    def test_unknown_base_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--value", "1", "--base", "3"])
        assert result.exit_code == 2

    def test_missing_value_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert"])
        assert result.exit_code == 2


class TestBatchCommand:
    def test_all_lines_convert(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "values.txt"
        source.write_text("ff\n\n10\n", encoding="utf-8")
        result = runner.invoke(cli, ["batch", str(source), "--base", "16", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [d["decimal"] for d in data] == ["255", "16"]

    def test_failure_sets_exit_code(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "values.txt"
        source.write_text("7\n9\n", encoding="utf-8")
        result = runner.invoke(cli, ["batch", str(source), "--base", "8"])
        assert result.exit_code == 1
        assert "1 converted, 1 failed" in result.output

    def test_reads_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["batch", "-", "--base", "roman", "--format", "json"], input="XIV\nMMMM\n"
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [d["value"] for d in data] == [14, 4000]

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["batch", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output


class TestInfoCommands:
    def test_notations(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["notations"])
        assert result.exit_code == 0
        for label in ("Binary", "Octal", "Decimal", "Hexadecimal", "Roman"):
            assert label in result.output

    def test_version(self, runner: CliRunner, expected_version: str) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output

    def test_log_level_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "debug", "convert", "--value", "1"])
        assert result.exit_code == 0

    @pytest.mark.parametrize(
        ("levels", "expected"),
        [
            (["debug", "warning"], logging.WARNING),
            (["warning", "debug"], logging.DEBUG),
            (["error", "info"], logging.INFO),
        ],
    )
    def test_log_level_applies_on_every_invocation(
        self, runner: CliRunner, levels: list[str], expected: int
    ) -> None:
        for level in levels:
            result = runner.invoke(cli, ["--log-level", level, "convert", "--value", "1"])
            assert result.exit_code == 0
        package_logger = logging.getLogger("numconv")
        assert package_logger.level == expected
        assert len([h for h in package_logger.handlers if isinstance(h, RichHandler)]) == 1
