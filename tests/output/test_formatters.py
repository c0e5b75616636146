"""Tests for the format_result dispatcher and OutputSettings."""

import json

from recipectl.output.formatters import OutputSettings, format_result
from recipectl.services.parse import ParseService
from recipectl.services.result import ServiceError, ServiceResult


def _err(op: str = "parse_index", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="invalid_index", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.width is None


class TestFormatResult:
    def test_json_mode(self, service: ParseService) -> None:
        output = format_result(service.index("2"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse_index"
        assert data["data"]["items"][0]["one_based"] == 2

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self, service: ParseService) -> None:
        output = format_result(
            service.index("2"), settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["ok"] is True

    def test_quiet_mode_prints_canonical_values(self, service: ParseService) -> None:
        output = format_result(service.indices("3,1"), settings=OutputSettings(quiet=True))
        assert output == "3\n1"

    def test_quiet_single_value(self, service: ParseService) -> None:
        result = service.price_filter(" <   7 ")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "< 7.0"

    def test_quiet_error(self) -> None:
        output = format_result(_err(msg="nope"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: parse_index")
        assert "nope" in output

    def test_default_human_mode(self, service: ParseService) -> None:
        output = format_result(service.title("Laksa"))
        assert output.startswith("OK")
        assert "Laksa" in output
