from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class CompanyCreate(BaseModel):
    """Create a company (tenant). Slug is immutable once created."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    domain: str | None = Field(None, max_length=255)
    logo: str | None = Field(None, max_length=500)
    description: str | None = None
    industry: str | None = Field(None, max_length=100)
    active: bool = True


class CompanyUpdate(BaseModel):
    """Update company details. Slug is not accepted."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=255)
    domain: str | None = Field(None, max_length=255)
    logo: str | None = Field(None, max_length=500)
    description: str | None = None
    industry: str | None = Field(None, max_length=100)
    active: bool | None = None


class CompanyCounts(BaseModel):
    users: int = 0
    cases: int = 0
    documents: int = 0


class CompanySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str


class CompanyResponse(BaseModel):
    """Company details response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    domain: str | None
    logo: str | None
    description: str | None
    industry: str | None
    active: bool
    created_at: datetime
    updated_at: datetime


class CompanyListItem(CompanyResponse):
    counts: CompanyCounts = Field(default_factory=CompanyCounts)
