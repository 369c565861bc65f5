from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: str = Field(default="active", min_length=1, max_length=50)
    budget: float | None = Field(None, ge=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    start_date: date | None = None
    end_date: date | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ProjectUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(None, min_length=1, max_length=50)
    budget: float | None = Field(None, ge=0)
    end_date: date | None = None
    metadata: dict[str, Any] | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    status: str
    budget: float | None
    currency: str
    start_date: date
    end_date: date | None
    metadata: dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("extra", "metadata")
    )
    tenant_id: int
    created_at: datetime
    updated_at: datetime
