from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from legacore.models.enums import CaseStatus
from legacore.schemas.user_schemas import UserSummary


class CaseCreate(BaseModel):
    """Schema for creating a case. The case number is generated."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: CaseStatus = CaseStatus.OPEN
    priority: int = Field(default=3, ge=1, le=5)
    amount: float | None = Field(None, ge=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    assigned_to_id: int | None = None
    due_date: datetime | None = None


class CaseUpdate(BaseModel):
    """Partial update. Any status transition is allowed."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: CaseStatus | None = None
    priority: int | None = Field(None, ge=1, le=5)
    amount: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    assigned_to_id: int | None = None
    due_date: datetime | None = None


class CaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    case_number: str
    title: str
    description: str | None
    status: CaseStatus
    priority: int
    amount: float | None
    currency: str
    due_date: datetime | None
    tenant_id: int
    assigned_to_id: int | None
    assigned_to: UserSummary | None = None
    document_count: int = 0
    created_at: datetime
    updated_at: datetime
