"""Per-paginator configuration."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import get_settings
from ..hooks.events import EventLogger, noop_logger
from ..hooks.metrics import MetricsCollector, NoopMetrics


def _default_page_size() -> int:
    return get_settings().default_page_size


class PaginatorOptions(BaseModel):
    """Options fixed for the lifetime of one paginator."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_size: int = Field(default_factory=_default_page_size, description="Rows per page")
    columns: List[str] = Field(default_factory=list, description="Columns replacing the * projection")
    filters: Dict[str, Any] = Field(default_factory=dict, description="Filter descriptors and values")
    cancellation: Any = Field(default=None, description="Signal passed through to the session")
    logger: EventLogger = Field(default=noop_logger, description="Structured event hook")
    metrics: MetricsCollector = Field(default_factory=NoopMetrics, description="Metrics hook")

    @field_validator("page_size", mode="before")
    @classmethod
    def default_missing_page_size(cls, v):
        """Fall back to the configured default for a missing size."""
        if v is None:
            return _default_page_size()
        return v

    @field_validator("page_size")
    @classmethod
    def default_non_positive_page_size(cls, v):
        """Fall back to the configured default for non-positive sizes."""
        if v <= 0:
            return _default_page_size()
        return v
