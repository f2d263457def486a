"""Tests for report model."""

import pytest
from pydantic import ValidationError

from powerbi_reporter.models.report import Report
from powerbi_reporter.testing.factories import ReportFactory


def test_payload_has_dashboard_fields() -> None:
    """Renders the dashboard's column names and the boolean shim."""
    report = Report(
        product="shop",
        component="api",
        environment="QA",
        date="2024-05-01T12:00:00.000Z",
        duration_seconds=2.5,
        success=True,
        avg_response_time_ms=120.5,
        avg_response_size_bytes=512,
    )

    assert report.to_payload() == {
        "product": "shop",
        "component": "api",
        "environment": "QA",
        "date": "2024-05-01T12:00:00.000Z",
        "duration": 2.5,
        "success": 1,
        "avgResponseTime": 120.5,
        "avgResponseSize": 512,
        "false": 0,
        "true": 1,
    }


def test_failed_run_is_encoded_as_zero() -> None:
    """Encodes an unsuccessful run as 0."""
    report = ReportFactory.build(success=False)

    assert report.to_payload()["success"] == 0


def test_accepts_dashboard_aliases() -> None:
    """Validates payload-shaped input."""
    report = Report.model_validate(
        {
            "date": "2024-05-01T12:00:00.000Z",
            "duration": 1.0,
            "success": True,
            "avgResponseTime": 10,
        }
    )

    assert report.duration_seconds == 1.0
    assert report.avg_response_time_ms == 10
    assert report.avg_response_size_bytes == 0


def test_rejects_negative_duration() -> None:
    """Refuses a negative duration."""
    with pytest.raises(ValidationError):
        Report(
            date="2024-05-01T12:00:00.000Z", duration_seconds=-1.0, success=True
        )


def test_is_immutable() -> None:
    """Refuses mutation after construction."""
    report = ReportFactory.build()

    with pytest.raises(ValidationError):
        report.success = not report.success  # type: ignore[misc]
