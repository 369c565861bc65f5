from collections.abc import Mapping
from datetime import datetime, UTC

from sqlalchemy.orm import Session

from legacore.models.analytics import AnalyticsRecord
from legacore.models.tenant import Tenant
from legacore.repositories.analytics_repository import AnalyticsRepository
from legacore.schemas.analytics_schemas import AnalyticsCreate, AnalyticsPage, AnalyticsResponse
from legacore.services.aggregation import group_metrics


def current_period() -> str:
    """Current month as YYYY-MM"""
    return datetime.now(UTC).strftime("%Y-%m")


class AnalyticsService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = AnalyticsRepository(db)

    def list_metrics(self, params: Mapping[str, str], tenant: Tenant) -> AnalyticsPage:
        """
        One page of metric records plus per-metric aggregates of that page.
        """
        records, total, page_request = self.repo.find_page(params, tenant.id)
        return AnalyticsPage.create(
            [AnalyticsResponse.model_validate(r) for r in records],
            total,
            page_request,
            aggregated=group_metrics(records),
        )

    def record_metric(self, data: AnalyticsCreate, tenant: Tenant) -> AnalyticsRecord:
        record = AnalyticsRecord(
            metric_name=data.metric_name,
            metric_value=data.metric_value,
            period=data.period or current_period(),
            extra=data.metadata,
            tenant_id=tenant.id,
        )
        return self.repo.create(record)
