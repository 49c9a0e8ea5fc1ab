"""Tests for human/JSON result formatting."""

import json

from subjectid.output.formatters import format_result
from subjectid.services.result import ServiceError, ServiceResult


class TestFormatResult:
    def test_human_success(self) -> None:
        result = ServiceResult(
            ok=True, op="describe", data={"format": "aliases", "formats": ["account"]}
        )
        output = format_result(result)
        assert output.splitlines() == [
            "OK: describe",
            "  format: aliases",
            '  formats: ["account"]',
        ]

    def test_quiet_drops_data(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"format": "email"})
        assert format_result(result, quiet=True) == "OK: describe"

    def test_human_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="describe",
            error=ServiceError(code="invalid_json", message="Input is not valid JSON"),
        )
        assert format_result(result) == "ERROR: describe: Input is not valid JSON"

    def test_error_without_payload(self) -> None:
        result = ServiceResult(ok=False, op="describe")
        assert format_result(result) == "ERROR: describe: Unknown error"

    def test_json_output(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"count": 2})
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["data"] == {"count": 2}
        assert parsed["op"] == "describe"
