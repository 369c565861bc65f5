from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from legacore.database import get_db
from legacore.dependencies import get_current_tenant, list_params
from legacore.models.tenant import Tenant
from legacore.services.credit_service import CreditService
from legacore.schemas.credit_schemas import (
    CreditAmountRequest,
    CreditAccountResponse,
    CreditHistoryPage,
    CreditTransactionResponse,
    CreditTransactionResult,
)

router = APIRouter()


def _result(credit, transaction) -> CreditTransactionResult:
    return CreditTransactionResult(
        account=CreditAccountResponse.model_validate(credit),
        transaction=CreditTransactionResponse.model_validate(transaction),
    )


@router.get("/", response_model=CreditHistoryPage)
def get_credits(
    params: dict = Depends(list_params),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Credit account summary plus transaction history.

    - Filter: type (PURCHASE, USAGE)
    - The account is opened with a zero balance on first access
    """
    return CreditService(db).get_history(params, tenant)


@router.post("/purchase", response_model=CreditTransactionResult)
def purchase_credits(
    request_data: CreditAmountRequest,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    credit, transaction = CreditService(db).purchase(request_data, tenant)
    return _result(credit, transaction)


@router.post("/use", response_model=CreditTransactionResult)
def use_credits(
    request_data: CreditAmountRequest,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Spend credits.

    - Returns 400 if the amount exceeds the balance; nothing is recorded
    - Balance change and transaction record are committed together
    """
    credit, transaction = CreditService(db).use(request_data, tenant)
    return _result(credit, transaction)
