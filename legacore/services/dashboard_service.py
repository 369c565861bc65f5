from sqlalchemy.orm import Session

from legacore.models.tenant import Tenant
from legacore.repositories.case_repository import CaseRepository
from legacore.repositories.credit_repository import CreditRepository
from legacore.repositories.document_repository import DocumentRepository
from legacore.repositories.project_repository import ProjectRepository
from legacore.schemas.dashboard_schemas import (
    DashboardResponse,
    CaseStats,
    DocumentStats,
    ProjectStats,
    CreditStats,
)
from legacore.schemas.tenant_schemas import CompanySummary


class DashboardService:
    """Tenant-wide summary statistics computed in the database"""

    def __init__(self, db: Session):
        self.db = db
        self.case_repo = CaseRepository(db)
        self.document_repo = DocumentRepository(db)
        self.project_repo = ProjectRepository(db)
        self.credit_repo = CreditRepository(db)

    def get_dashboard(self, tenant: Tenant) -> DashboardResponse:
        """Read-only: a tenant without a credit account reports zero credits"""
        case_counts = self.case_repo.status_counts(tenant.id)
        doc_counts = self.document_repo.type_counts(tenant.id)
        project_counts = self.project_repo.status_counts(tenant.id)
        credit = self.credit_repo.get_by_tenant(tenant.id)

        return DashboardResponse(
            company=CompanySummary.model_validate(tenant),
            cases=CaseStats(
                total=sum(case_counts.values()),
                by_status=case_counts,
                total_amount=self.case_repo.amount_total(tenant.id),
            ),
            documents=DocumentStats(
                total=sum(doc_counts.values()),
                by_type=doc_counts,
                total_size=self.document_repo.total_size(tenant.id),
            ),
            projects=ProjectStats(
                total=sum(project_counts.values()),
                by_status=project_counts,
                total_budget=self.project_repo.budget_total(tenant.id),
            ),
            credits=CreditStats.model_validate(credit) if credit else CreditStats(),
        )
