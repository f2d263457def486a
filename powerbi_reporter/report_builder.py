"""Conversion of a finished run into its report."""

from datetime import datetime, timezone

from powerbi_reporter.accumulator import RunAccumulator
from powerbi_reporter.models.context import RunContext
from powerbi_reporter.models.report import Report


def format_timestamp(instant: datetime) -> str:
    """Render an instant as UTC ISO-8601 with millisecond precision."""
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_report(
    context: RunContext, accumulator: RunAccumulator, now: datetime
) -> Report:
    """Build the report of a run.

    Args:
        context: Static metadata of the run
        accumulator: Final statistics of the run
        now: Completion instant, used only for the duration

    Returns:
        The report, dated at the run start

    """
    duration = abs((now - context.start_timestamp).total_seconds())
    return Report(
        product=context.product,
        component=context.component,
        environment=context.environment,
        date=format_timestamp(context.start_timestamp),
        duration_seconds=duration,
        success=accumulator.overall_passed,
        avg_response_time_ms=accumulator.average_response_time,
        avg_response_size_bytes=accumulator.average_response_size,
    )
