from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from legacore.models.enums import UserRole
from legacore.schemas.tenant_schemas import CompanySummary

CREDENTIAL_FIELDS = frozenset({"password", "password_hash", "salt"})
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def redact_credentials(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of data without credential material"""
    return {key: value for key, value in data.items() if key not in CREDENTIAL_FIELDS}


class UserCreate(BaseModel):
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=8, max_length=128)
    company_id: int = Field(..., gt=0)
    name: str | None = Field(None, max_length=255)
    role: UserRole = UserRole.USER
    active: bool = True


class UserSummary(BaseModel):
    """Minimal user reference embedded in cases and documents"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    email: str


class UserResponse(BaseModel):
    """
    User as returned by the API.

    Credential fields are not declared here, and are stripped from mapping
    input before validation, so they can never be serialized.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None
    role: UserRole
    active: bool
    tenant_id: int
    company: CompanySummary | None = Field(None, validation_alias="tenant")
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="before")
    @classmethod
    def _strip_credentials(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return redact_credentials(data)
        return data
