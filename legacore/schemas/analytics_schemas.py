from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from legacore.core.pagination import Paginated

PERIOD_PATTERN = r"^\d{4}-(\d{2}|Q[1-4])$"


class AnalyticsCreate(BaseModel):
    metric_name: str = Field(..., min_length=1, max_length=100)
    metric_value: float
    period: str | None = Field(None, pattern=PERIOD_PATTERN, description="YYYY-MM or YYYY-Qn")
    metadata: dict[str, Any] = Field(default_factory=dict)


class AnalyticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    metric_name: str
    metric_value: float
    period: str
    recorded_at: datetime
    metadata: dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("extra", "metadata")
    )
    tenant_id: int


class MetricPoint(BaseModel):
    period: str
    value: float


class MetricAggregate(BaseModel):
    """Per-metric rollup of one result page"""

    name: str
    values: list[MetricPoint]
    total: float
    avg: float
    count: int


class AnalyticsPage(Paginated[AnalyticsResponse]):
    aggregated: list[MetricAggregate] = Field(default_factory=list)
