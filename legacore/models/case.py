from datetime import datetime

from sqlalchemy import (
    String, Integer, Numeric, ForeignKey, Enum, Text, DateTime, CheckConstraint, Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional, TYPE_CHECKING

from legacore.models.base import Base, TimestampMixin
from legacore.models.enums import CaseStatus

if TYPE_CHECKING:
    from legacore.models.tenant import Tenant
    from legacore.models.user import User
    from legacore.models.document import Document


class Case(Base, TimestampMixin):
    """
    A tenant's work item (recovery case, engagement, matter).

    case_number is generated on creation and globally unique.
    Priority ranges from 1 (highest) to 5.
    """

    __tablename__ = "cases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    case_number: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[CaseStatus] = mapped_column(
        Enum(CaseStatus, native_enum=False), nullable=False, default=CaseStatus.OPEN
    )
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    amount: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    assigned_to_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="cases")
    assigned_to: Mapped[Optional["User"]] = relationship("User")
    documents: Mapped[list["Document"]] = relationship("Document", back_populates="case")

    __table_args__ = (
        CheckConstraint("priority BETWEEN 1 AND 5", name="ck_cases_priority_range"),
        Index("ix_cases_tenant_status", "tenant_id", "status"),
    )
