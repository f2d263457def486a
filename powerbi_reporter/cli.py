"""CLI entry point for reporting a recorded run to Power BI."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from powerbi_reporter.config import ReporterConfig
from powerbi_reporter.events import AsyncEventEmitter
from powerbi_reporter.models.context import utc_now
from powerbi_reporter.models.outcome import DeliveryOutcome
from powerbi_reporter.models.report import Report
from powerbi_reporter.replay import load_recording, recording_window, replay
from powerbi_reporter.reporter import Reporter
from powerbi_reporter.senders import HttpReportSender

STATUS_SYMBOLS = {
    "delivered": "✅",
    "failed": "❌",
    "not_configured": "❗",
}


def log_report_summary(
    log: logging.Logger, report: Report, outcome: DeliveryOutcome
) -> None:
    """Log a formatted summary of the report and its delivery."""
    log.info("=" * 80)
    log.info("Report Summary:")
    log.info("=" * 80)
    log.info(
        "%s %s/%s (%s): %s",
        STATUS_SYMBOLS.get(outcome.status, "?"),
        report.product,
        report.component,
        report.environment,
        "passed" if report.success else "failed",
    )
    log.info("  Duration: %.2fs", report.duration_seconds)
    log.info("  Avg response time: %.2fms", report.avg_response_time_ms)
    log.info("  Avg response size: %.2fB", report.avg_response_size_bytes)
    if outcome.status_code is not None:
        log.info("  Status code: %s", outcome.status_code)
    if outcome.message:
        log.info("  Message: %s", outcome.message)


def format_output(report: Report, outcome: DeliveryOutcome) -> dict[str, Any]:
    """Format the report and its delivery outcome for JSON output."""
    return {
        "status": outcome.status,
        "status_code": outcome.status_code,
        "message": outcome.message,
        "report": report.to_payload(),
    }


async def run(
    events_path: Path,
    collection_name: str,
    reporter_config_json: str,
) -> int:
    """Replay a recorded run through the reporter and return exit code."""
    log = logging.getLogger("powerbi_reporter")

    config = ReporterConfig.model_validate_json(reporter_config_json)

    log.info("Loading recording: %s", events_path)
    events = load_recording(events_path)
    started, finished = recording_window(events)

    async with HttpReportSender.open() as sender:
        reporter = Reporter(
            context=config.to_context(collection_name, start_timestamp=started),
            sender=sender,
            clock=(lambda: finished) if finished is not None else utc_now,
        )

        emitter = AsyncEventEmitter()
        reporter.subscribe(emitter)
        await replay(events, emitter)

    if reporter.report is None or reporter.outcome is None:
        log.error("Recording has no done event, nothing was reported")
        print(json.dumps({"status": "incomplete"}))
        return 1

    log_report_summary(log, reporter.report, reporter.outcome)
    print(json.dumps(format_output(reporter.report, reporter.outcome), indent=2))

    return 0 if reporter.outcome.delivered else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Report a recorded collection run to Power BI"
    )
    parser.add_argument(
        "--events",
        type=Path,
        required=True,
        help="Path to the JSON-lines recording of the run's events",
    )
    parser.add_argument(
        "--collection-name",
        required=True,
        help="Name of the executed collection",
    )
    parser.add_argument(
        "--reporter-config",
        required=True,
        help="JSON reporter options (powerbiURL, product, component, environment)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            events_path=args.events,
            collection_name=args.collection_name,
            reporter_config_json=args.reporter_config,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
