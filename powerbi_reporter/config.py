"""Reporter configuration supplied before the first event arrives."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from powerbi_reporter.models.context import RunContext, utc_now


class ReporterConfig(BaseModel):
    """Options of the Power BI reporter.

    Accepts the executor's camelCase reporter option names as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    report_url: str | None = Field(default=None, alias="powerbiURL")
    product: str | None = None
    component: str | None = None
    environment: str | None = None

    def to_context(
        self, collection_name: str, start_timestamp: datetime | None = None
    ) -> RunContext:
        """Create the run context, started now unless an instant is given."""
        return RunContext(
            collection_name=collection_name,
            product=self.product,
            component=self.component,
            environment=self.environment,
            report_url=self.report_url,
            start_timestamp=start_timestamp or utc_now(),
        )
