"""Tenant (company) model for multi-tenant isolation."""

from sqlalchemy import String, Integer, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional, TYPE_CHECKING

from legacore.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from legacore.models.user import User
    from legacore.models.case import Case
    from legacore.models.document import Document
    from legacore.models.credit import Credit


class Tenant(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    A tenant is a customer company served by a white-label deployment,
    e.g. "HBU Asset Recovery" (slug "hbu-asset-recovery"). Every business
    record (users, cases, documents, projects, analytics, credits) belongs
    to exactly one tenant, and a tenant never observes another tenant's rows.

    Both slug and name are unique; slug is immutable once created.
    """

    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    domain: Mapped[str | None] = mapped_column(String(255), nullable=True)
    logo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    users: Mapped[list["User"]] = relationship("User", back_populates="tenant")
    cases: Mapped[list["Case"]] = relationship("Case", back_populates="tenant")
    documents: Mapped[list["Document"]] = relationship("Document", back_populates="tenant")
    credit: Mapped[Optional["Credit"]] = relationship("Credit", back_populates="tenant", uselist=False)

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, slug='{self.slug}')>"
