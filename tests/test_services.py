"""
Tests for the Service Layer.

Services are tested without the CLI or MCP infrastructure.
"""

import pytest

from junit_report.core import ReportSummary
from junit_report.services import (
    ErrorCode,
    ReportLoader,
    ReportService,
    ServiceResult,
    create_report_service,
)


# =============================================================================
# ServiceResult Tests
# =============================================================================

class TestServiceResult:
    """Tests for the ServiceResult pattern."""

    def test_ok_creates_success_result(self):
        """Test creating a successful result."""
        result = ServiceResult.ok({"key": "value"})

        assert result.success is True
        assert result.data == {"key": "value"}
        assert result.error is None

    def test_fail_creates_failure_result(self):
        """Test creating a failed result."""
        result = ServiceResult.fail(
            ErrorCode.PARSE_ERROR,
            "bad xml",
            details={"cause": "x"}
        )

        assert result.success is False
        assert result.data is None
        assert result.error.code == ErrorCode.PARSE_ERROR
        assert result.error.message == "bad xml"
        assert result.error.details == {"cause": "x"}

    def test_map_transforms_success(self):
        result = ServiceResult.ok(5).map(lambda x: x * 2)

        assert result.success is True
        assert result.data == 10

    def test_map_preserves_failure(self):
        result = ServiceResult.fail(ErrorCode.READ_ERROR, "error").map(lambda x: x * 2)

        assert result.success is False
        assert result.error.message == "error"

    def test_error_to_dict(self):
        """Test error serialization."""
        result = ServiceResult.fail(
            ErrorCode.FILE_NOT_FOUND,
            "File missing",
            details={"path": "/report.xml"}
        )

        error_dict = result.error.to_dict()

        assert error_dict["code"] == "file_not_found"
        assert error_dict["message"] == "File missing"
        assert error_dict["details"]["path"] == "/report.xml"


# =============================================================================
# ReportLoader Tests
# =============================================================================

class TestReportLoader:
    """Tests for ReportLoader."""

    def test_load_from_file(self, report_file, mixed):
        result = ReportLoader().load(file_path=report_file(mixed))

        assert result.success is True
        assert result.data.total_cases == 4

    def test_load_from_string(self, smoke_passing):
        result = ReportLoader().load(xml=smoke_passing)

        assert result.success is True
        assert result.data.suites[0].name == "smoke"

    def test_file_path_wins_over_xml(self, report_file, mixed, smoke_passing):
        result = ReportLoader().load(file_path=report_file(mixed), xml=smoke_passing)

        assert result.data.total_cases == 4

    def test_no_input(self):
        result = ReportLoader().load()

        assert result.success is False
        assert result.error.code == ErrorCode.MISSING_INPUT

    def test_missing_file(self, tmp_path):
        result = ReportLoader().load(file_path=str(tmp_path / "missing.xml"))

        assert result.success is False
        assert result.error.code == ErrorCode.FILE_NOT_FOUND
        assert result.error.message.startswith("failed to open report file")

    def test_directory_is_read_error(self, tmp_path):
        """Opening a directory fails at the I/O boundary."""
        result = ReportLoader().load(file_path=str(tmp_path))

        assert result.success is False
        assert result.error.code in (ErrorCode.READ_ERROR, ErrorCode.PERMISSION_DENIED)

    def test_malformed_file(self, report_file):
        result = ReportLoader().load(file_path=report_file(b"<testsuites"))

        assert result.success is False
        assert result.error.code == ErrorCode.PARSE_ERROR
        assert "cause" in result.error.details

    def test_malformed_string(self):
        result = ReportLoader().load(xml="<<<")

        assert result.error.code == ErrorCode.PARSE_ERROR

    def test_too_large(self, report_file, mixed):
        loader = ReportLoader(max_size=10)

        result = loader.load(file_path=report_file(mixed))

        assert result.success is False
        assert result.error.code == ErrorCode.FILE_TOO_LARGE
        assert result.error.details["max_size"] == 10

    def test_string_too_large(self, mixed):
        result = ReportLoader(max_size=10).load(xml=mixed)

        assert result.error.code == ErrorCode.FILE_TOO_LARGE


# =============================================================================
# ReportService Tests
# =============================================================================

class TestReportService:
    """Tests for ReportService."""

    def test_summarize(self, smoke_failing):
        result = ReportService().summarize(xml=smoke_failing)

        assert result.success is True
        assert isinstance(result.data, ReportSummary)
        assert result.data.failed == 1

    def test_generate_markdown(self, report_file, smoke_passing):
        result = ReportService().generate(file_path=report_file(smoke_passing))

        assert result.success is True
        assert result.data.startswith("## E2E report :white_check_mark: Passed\n")
        assert "smoke|boot|`0.5`|:white_check_mark: Passed" in result.data

    def test_generate_failure_keeps_error(self):
        result = ReportService().generate(xml=b"not xml")

        assert result.success is False
        assert result.error.code == ErrorCode.PARSE_ERROR

    def test_injected_loader(self, smoke_passing):
        """The loader can be injected."""
        service = create_report_service(loader=ReportLoader(max_size=1))

        result = service.summarize(xml=smoke_passing)

        assert result.error.code == ErrorCode.FILE_TOO_LARGE

    @pytest.mark.parametrize("fixture", ["smoke_passing", "mixed", "empty"])
    def test_row_count_matches_cases(self, request, fixture):
        from junit_report.core import parse_report

        data = request.getfixturevalue(fixture)
        result = ReportService().summarize(xml=data)

        assert result.data.total == parse_report(data).total_cases
