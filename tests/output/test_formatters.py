"""Tests for the format_result dispatcher and OutputSettings."""

import json

from presence.output.formatters import OutputSettings, format_result
from presence.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.color is True


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("check", count=2), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "check"
        assert data["data"]["count"] == 2

    def test_json_mode_error(self) -> None:
        output = format_result(_err("check", "Bad"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK: test")


class TestFormatResultHuman:
    def test_ok_with_data(self) -> None:
        output = format_result(_ok("coalesce", value="0", exists=True))
        lines = output.splitlines()
        assert lines[0] == "OK: coalesce"
        assert "  value: 0" in lines
        assert "  exists: True" in lines

    def test_verdict_lines(self) -> None:
        result = _ok(
            "check",
            results=[
                {"input": "0", "value": "0", "type": "int", "exists": True},
                {"input": "None", "value": "None", "type": "NoneType", "exists": False},
            ],
            count=2,
        )
        output = format_result(result)
        assert "exists 0 (int)" in output
        assert "absent None (NoneType)" in output
        assert "count: 2" in output

    def test_markup_in_values_is_escaped(self) -> None:
        output = format_result(_ok("coalesce", value="[bold]x[/bold]"))
        assert "[bold]x[/bold]" in output

    def test_quiet_shows_status_only(self) -> None:
        output = format_result(_ok("check", count=3), settings=OutputSettings(quiet=True))
        assert output == "OK: check"

    def test_error(self) -> None:
        output = format_result(_err("check", "hook failed"))
        assert output == "ERROR: check - hook failed"

    def test_list_values_rendered_as_json(self) -> None:
        output = format_result(_ok("hooks", plugins=["a", "b"]))
        assert '  plugins: ["a","b"]' in output
