from datetime import datetime

from sqlalchemy import String, Integer, Numeric, ForeignKey, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from legacore.models.base import Base, TimestampMixin, utcnow


class AnalyticsRecord(Base, TimestampMixin):
    """
    One metric observation for a period ("2024-01", "2024-Q1", ...).
    """

    __tablename__ = "analytics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    metric_name: Mapped[str] = mapped_column(String(100), nullable=False)
    metric_value: Mapped[float] = mapped_column(Numeric(precision=18, scale=4), nullable=False)
    period: Mapped[str] = mapped_column(String(20), nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    extra: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)
    tenant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )

    __table_args__ = (
        Index("ix_analytics_tenant_metric_period", "tenant_id", "metric_name", "period"),
    )
