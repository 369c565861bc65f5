from datetime import datetime

from sqlalchemy import String, Integer, Numeric, Float, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from legacore.models.base import Base, TimestampMixin


class ContractOpportunity(Base, TimestampMixin):
    """
    Government contracting opportunity.

    Opportunities are global (not owned by a tenant). ai_score is a
    keyword-relevance score in [0, 100] computed on creation.
    """

    __tablename__ = "contract_opportunities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    solicitation: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    agency: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    posted_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    response_deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    set_value: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    place_of_performance: Mapped[str | None] = mapped_column(String(255), nullable=True)
    naics_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    psc_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    contact_info: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    ai_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, index=True)
    ai_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    extra: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)
