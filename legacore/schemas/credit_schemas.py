from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from legacore.core.pagination import Paginated
from legacore.models.enums import CreditTransactionType


class CreditAmountRequest(BaseModel):
    """Purchase or use credits"""

    amount: int = Field(..., gt=0)
    description: str | None = Field(None, max_length=500)
    user_id: int | None = None


class CreditAccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    balance: int
    total_purchased: int
    total_used: int
    tenant_id: int
    updated_at: datetime


class CreditTransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: CreditTransactionType
    amount: int
    description: str | None
    balance_after: int
    user_id: int | None
    created_at: datetime


class CreditTransactionResult(BaseModel):
    account: CreditAccountResponse
    transaction: CreditTransactionResponse


class CreditHistoryPage(Paginated[CreditTransactionResponse]):
    account: CreditAccountResponse
