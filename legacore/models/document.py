from sqlalchemy import String, Integer, BigInteger, ForeignKey, Enum, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional, TYPE_CHECKING

from legacore.models.base import Base, TimestampMixin
from legacore.models.enums import DocumentType

if TYPE_CHECKING:
    from legacore.models.tenant import Tenant
    from legacore.models.user import User
    from legacore.models.case import Case


class Document(Base, TimestampMixin):
    """
    File metadata for a tenant document, optionally linked to a case.

    Only metadata is stored; file bytes live in external storage.
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[DocumentType] = mapped_column(
        Enum(DocumentType, native_enum=False), nullable=False, default=DocumentType.OTHER
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    filepath: Mapped[str] = mapped_column(String(500), nullable=False)
    filesize: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    uploaded_by_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    case_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("cases.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="documents")
    uploaded_by: Mapped["User"] = relationship("User")
    case: Mapped[Optional["Case"]] = relationship("Case", back_populates="documents")
