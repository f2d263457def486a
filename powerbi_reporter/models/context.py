"""Static metadata of a single reported run."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class RunContext:
    """Configuration of a run, fixed when the reporter subscribes."""

    collection_name: str
    product: str | None = None
    component: str | None = None
    environment: str | None = None
    report_url: str | None = None
    start_timestamp: datetime = field(default_factory=utc_now)
