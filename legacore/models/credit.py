from sqlalchemy import String, Integer, ForeignKey, Enum, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from legacore.models.base import Base, TimestampMixin
from legacore.models.enums import CreditTransactionType

if TYPE_CHECKING:
    from legacore.models.tenant import Tenant


class Credit(Base, TimestampMixin):
    """
    Credit account of a tenant (one per tenant).

    Invariant: balance == total_purchased - total_used and balance >= 0.
    Only CreditService mutates these columns, together with a
    CreditTransaction row in the same database transaction.
    """

    __tablename__ = "credits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_purchased: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tenant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, unique=True
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="credit")
    transactions: Mapped[list["CreditTransaction"]] = relationship(
        "CreditTransaction", back_populates="credit"
    )

    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_credits_balance_non_negative"),
        CheckConstraint(
            "balance = total_purchased - total_used", name="ck_credits_balance_consistent"
        ),
    )


class CreditTransaction(Base, TimestampMixin):
    """Append-only log of credit purchases and usage"""

    __tablename__ = "credit_transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[CreditTransactionType] = mapped_column(
        Enum(CreditTransactionType, native_enum=False), nullable=False
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    balance_after: Mapped[int] = mapped_column(Integer, nullable=False)
    credit_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("credits.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    credit: Mapped["Credit"] = relationship("Credit", back_populates="transactions")
