"""Tests for format_result and OutputSettings."""

import json
import sys

import pytest
from rich.console import Console

from bras.output.console import get_output
from bras.output.formatters import OutputSettings, format_result
from bras.services.cpf import CpfService
from bras.services.result import ServiceError, ServiceResult


def _err(op: str = "parse_cpf", msg: str = "Invalid CPF: 'x'") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="INVALID_CPF", message=msg, detail={"input": "x"}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(Exception):
            s.quiet = True  # type: ignore[misc]


class TestJsonMode:
    def test_success(self) -> None:
        result = CpfService().parse("98484485439")
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "parse_cpf"
        assert data["data"]["cpf"] == "984.844.854-39"
        assert data["data"]["number"] == 98484485439

    def test_error(self) -> None:
        data = json.loads(format_result(_err(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_CPF"


class TestQuietMode:
    def test_single_cpf(self) -> None:
        result = CpfService().parse("98484485439")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "984.844.854-39"

    def test_check_lists_cpfs(self) -> None:
        result = CpfService().check(["98484485439", "05119439039"])
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output.splitlines() == ["984.844.854-39", "051.194.390-39"]

    def test_generic_success(self) -> None:
        result = ServiceResult(ok=True, op="noop")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: noop"

    def test_error(self) -> None:
        output = format_result(_err(msg="Bad input"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: parse_cpf")
        assert "Bad input" in output


class TestRichMode:
    def test_default_settings(self) -> None:
        result = CpfService().parse("98484485439")
        output = format_result(result)
        assert output.startswith("OK parse_cpf")
        assert "cpf: 984.844.854-39" in output
        assert "digits: 98484485439" in output
        assert "number: 98484485439" in output

    def test_no_ansi_codes_outside_terminal(self) -> None:
        output = format_result(CpfService().parse("98484485439"))
        assert "\x1b[" not in output

    def test_error_shows_detail(self) -> None:
        output = format_result(_err(msg="Bad input"))
        assert output.startswith("ERROR parse_cpf")
        assert "Bad input" in output
        assert "input: x" in output

    def test_check_table(self) -> None:
        result = CpfService().check(["98484485439", "05119439039"])
        output = format_result(result)
        assert "984.844.854-39" in output
        assert "051.194.390-39" in output
        assert "valid: 2" in output
        assert "invalid: 0" in output

    def test_bracketed_input_is_not_markup(self) -> None:
        result = CpfService().check(["[/]", "[bold]x[/bold]"])
        output = format_result(result)
        assert "[/]" in output
        assert "[bold]x[/bold]" in output


class TestGetOutput:
    def test_rejects_console_without_buffer(self) -> None:
        with pytest.raises(TypeError):
            get_output(Console(file=sys.stderr))
