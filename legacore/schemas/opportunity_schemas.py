from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class OpportunityCreate(BaseModel):
    solicitation: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=500)
    agency: str = Field(..., min_length=1, max_length=255)
    posted_date: datetime
    response_deadline: datetime
    description: str | None = None
    set_value: float | None = Field(None, ge=0)
    place_of_performance: str | None = Field(None, max_length=255)
    naics_code: str | None = Field(None, max_length=20)
    psc_code: str | None = Field(None, max_length=20)
    contact_info: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=500)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_deadline(self):
        if self.response_deadline < self.posted_date:
            raise ValueError("response_deadline must not be before posted_date")
        return self


class OpportunityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    solicitation: str
    title: str
    agency: str
    description: str | None
    posted_date: datetime
    response_deadline: datetime
    set_value: float | None
    place_of_performance: str | None
    naics_code: str | None
    psc_code: str | None
    contact_info: str | None
    url: str | None
    ai_score: float
    ai_summary: str | None
    metadata: dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("extra", "metadata")
    )
    created_at: datetime


class OpportunityStats(BaseModel):
    total: int
    high_value: int
    urgent_deadlines: int
    avg_score: float
