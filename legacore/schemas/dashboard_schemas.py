from pydantic import BaseModel, ConfigDict

from legacore.schemas.tenant_schemas import CompanySummary


class CaseStats(BaseModel):
    total: int
    by_status: dict[str, int]
    total_amount: float


class DocumentStats(BaseModel):
    total: int
    by_type: dict[str, int]
    total_size: int


class ProjectStats(BaseModel):
    total: int
    by_status: dict[str, int]
    total_budget: float


class CreditStats(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    balance: int = 0
    total_purchased: int = 0
    total_used: int = 0


class DashboardResponse(BaseModel):
    """Read-only summary of everything a tenant owns"""

    company: CompanySummary
    cases: CaseStats
    documents: DocumentStats
    projects: ProjectStats
    credits: CreditStats
