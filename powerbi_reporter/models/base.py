"""Base model configuration for report data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with frozen instances and alias population by field name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
