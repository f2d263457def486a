"""Models for report delivery outcomes."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class DeliveryOutcome:
    """Result of the single delivery attempt of a report.

    Delivery problems are reported here rather than raised, so they never
    reach the host executor.
    """

    status: Literal["delivered", "failed", "not_configured"]
    status_code: int | None = None
    message: str | None = None

    @property
    def delivered(self) -> bool:
        """Whether the endpoint accepted the report."""
        return self.status == "delivered"
