"""The aggregate record sent once per run."""

from typing import Any

from pydantic import Field

from powerbi_reporter.models.base import Model

# The receiving dashboard decodes booleans through these two constant columns.
BOOLEAN_ENCODING_SHIM = {"false": 0, "true": 1}


class Report(Model):
    """Summary of a finished run."""

    product: str | None = Field(default=None, description="Product label")
    component: str | None = Field(default=None, description="Component label")
    environment: str | None = Field(
        default=None, description="Environment label (QA, PROD, DEV)"
    )
    date: str = Field(..., description="ISO-8601 instant of the run start")
    duration_seconds: float = Field(
        ..., ge=0, alias="duration", description="Run duration in seconds"
    )
    success: bool = Field(..., description="Whether every assertion passed")
    avg_response_time_ms: float = Field(
        default=0, alias="avgResponseTime", description="Mean response time (ms)"
    )
    avg_response_size_bytes: float = Field(
        default=0, alias="avgResponseSize", description="Mean response size (B)"
    )

    def to_payload(self) -> dict[str, Any]:
        """Render the report as the dashboard's JSON row."""
        payload = self.model_dump(mode="json", by_alias=True)
        payload["success"] = 1 if self.success else 0
        payload.update(BOOLEAN_ENCODING_SHIM)
        return payload
