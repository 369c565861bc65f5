import logging
from collections.abc import Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from legacore.core.exceptions import NotFoundException, ValidationException
from legacore.models.credit import Credit, CreditTransaction
from legacore.models.enums import CreditTransactionType
from legacore.models.tenant import Tenant
from legacore.repositories.credit_repository import CreditRepository
from legacore.repositories.user_repository import UserRepository
from legacore.schemas.credit_schemas import (
    CreditAmountRequest,
    CreditAccountResponse,
    CreditHistoryPage,
    CreditTransactionResponse,
)

logger = logging.getLogger(__name__)


class CreditService:
    """
    Service for tenant credit accounts.

    Every balance change and its transaction-log row are committed together
    or not at all, keeping balance == total_purchased - total_used >= 0.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CreditRepository(db)
        self.user_repo = UserRepository(db)

    def get_account(self, tenant: Tenant) -> Credit:
        """Get the tenant's credit account, opening an empty one on first use"""
        credit = self.repo.get_by_tenant(tenant.id)
        if not credit:
            credit = self.repo.create_account(tenant.id)
            logger.info("Opened credit account for company %s", tenant.slug)
        return credit

    def get_history(self, params: Mapping[str, str], tenant: Tenant) -> CreditHistoryPage:
        """Account summary plus one page of its transactions (newest first)"""
        credit = self.get_account(tenant)
        transactions, total, page_request = self.repo.find_page(params, credit.id)
        return CreditHistoryPage.create(
            [CreditTransactionResponse.model_validate(t) for t in transactions],
            total,
            page_request,
            account=CreditAccountResponse.model_validate(credit),
        )

    def purchase(self, data: CreditAmountRequest, tenant: Tenant) -> tuple[Credit, CreditTransaction]:
        return self._apply(CreditTransactionType.PURCHASE, data, tenant)

    def use(self, data: CreditAmountRequest, tenant: Tenant) -> tuple[Credit, CreditTransaction]:
        """
        Spend credits.

        Raises:
            ValidationException: If the amount exceeds the balance
        """
        return self._apply(CreditTransactionType.USAGE, data, tenant)

    def _apply(
        self, txn_type: CreditTransactionType, data: CreditAmountRequest, tenant: Tenant
    ) -> tuple[Credit, CreditTransaction]:
        if data.user_id is not None and not self.user_repo.get_scoped(data.user_id, tenant.id):
            raise NotFoundException(f"User {data.user_id} not found")

        self.get_account(tenant)
        try:
            # Re-read under a row lock so concurrent adjustments serialize
            credit = self.repo.get_by_tenant(tenant.id, for_update=True)

            if txn_type == CreditTransactionType.USAGE:
                if data.amount > credit.balance:
                    raise ValidationException(
                        f"Insufficient credits: balance {credit.balance}, requested {data.amount}"
                    )
                credit.total_used += data.amount
            else:
                credit.total_purchased += data.amount
            credit.balance = credit.total_purchased - credit.total_used

            transaction = self.repo.create_no_commit(
                CreditTransaction(
                    type=txn_type,
                    amount=data.amount,
                    description=data.description,
                    balance_after=credit.balance,
                    credit_id=credit.id,
                    user_id=data.user_id,
                )
            )
            self.db.commit()
        except (ValidationException, SQLAlchemyError):
            self.db.rollback()
            raise

        self.db.refresh(credit)
        self.db.refresh(transaction)
        logger.info(
            "Credit %s of %s for company %s, balance now %s",
            txn_type.value, data.amount, tenant.slug, credit.balance,
        )
        return credit, transaction
