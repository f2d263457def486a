"""Report senders."""

from powerbi_reporter.senders.base import ReportSender
from powerbi_reporter.senders.http import HttpReportSender

__all__ = ["HttpReportSender", "ReportSender"]
