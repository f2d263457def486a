"""Abstract base class for report senders."""

from abc import ABC, abstractmethod

from powerbi_reporter.models.outcome import DeliveryOutcome
from powerbi_reporter.models.report import Report


class ReportSender(ABC):
    """Delivers a finished run's report to its destination."""

    @abstractmethod
    async def send(self, report: Report, endpoint: str | None) -> DeliveryOutcome:
        """Make the single delivery attempt for a report.

        Args:
            report: The report to deliver
            endpoint: Destination URL; a missing one is a configuration error

        Returns:
            The outcome of the attempt. Failures are returned, never raised.

        """
