from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from legacore.core.filters import FilterSpec, ExactField
from legacore.models.credit import Credit, CreditTransaction
from legacore.models.enums import CreditTransactionType
from legacore.repositories.base import QueryRepository

CREDIT_TRANSACTION_FILTERS = FilterSpec(
    model=CreditTransaction,
    tenant_column="credit_id",
    exact_fields={"type": ExactField("type", enum=CreditTransactionType)},
)


class CreditRepository(QueryRepository[CreditTransaction]):
    """
    Repository for credit accounts and their transaction log.

    Transaction queries are scoped by credit account, which is itself
    owned by exactly one tenant.
    """

    model_class = CreditTransaction
    filter_spec = CREDIT_TRANSACTION_FILTERS

    def get_by_tenant(self, tenant_id: int, for_update: bool = False) -> Credit | None:
        """
        Get a tenant's credit account.

        Args:
            tenant_id: Tenant ID
            for_update: Lock the row until the current transaction ends
                (ignored by SQLite)
        """
        stmt = select(Credit).where(Credit.tenant_id == tenant_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return self.db.scalar(stmt)

    def create_account(self, tenant_id: int) -> Credit:
        """
        Open an empty account for the tenant.

        If a concurrent request opened it first, the unique tenant_id rejects
        this insert and the existing account is returned instead.
        """
        credit = Credit(tenant_id=tenant_id, balance=0, total_purchased=0, total_used=0)
        self.db.add(credit)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self.get_by_tenant(tenant_id)
            if existing is None:
                raise
            return existing
        self.db.refresh(credit)
        return credit
