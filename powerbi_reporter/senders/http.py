"""Delivery of reports to a Power BI push endpoint over HTTP."""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from powerbi_reporter.models.outcome import DeliveryOutcome
from powerbi_reporter.models.report import Report
from powerbi_reporter.senders.base import ReportSender

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpReportSender(ReportSender):
    """Posts the report as a one-row JSON array."""

    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def open(cls) -> AsyncGenerator["HttpReportSender", None]:
        """Create sender with managed session lifecycle."""
        async with aiohttp.ClientSession() as session:
            yield cls(session=session)

    async def send(self, report: Report, endpoint: str | None) -> DeliveryOutcome:
        """Post the report once; never retried."""
        if not endpoint:
            log.error("Report destination not configured, report not sent")
            return DeliveryOutcome(
                status="not_configured",
                message="Report destination not configured",
            )

        log.info("Sending report to %s", endpoint)
        try:
            async with self.session.post(
                endpoint,
                json=[report.to_payload()],
                headers={"Content-Type": "application/json"},
            ) as response:
                text = await response.text(errors="replace")
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as error:
            log.error("Failed to send report: %s", error, exc_info=error)
            return DeliveryOutcome(status="failed", message=str(error) or repr(error))

        if not 200 <= status < 300:
            log.error("Report rejected: %s %s", status, text)
            return DeliveryOutcome(status="failed", status_code=status, message=text)

        log.info("Report delivered: %s %s", status, text)
        return DeliveryOutcome(status="delivered", status_code=status, message=text)
