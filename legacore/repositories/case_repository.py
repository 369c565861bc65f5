from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from legacore.core.filters import FilterSpec, ExactField
from legacore.models.case import Case
from legacore.models.document import Document
from legacore.models.enums import CaseStatus
from legacore.repositories.base import QueryRepository

CASE_FILTERS = FilterSpec(
    model=Case,
    search_fields=("title", "case_number", "description"),
    exact_fields={
        "status": ExactField("status", enum=CaseStatus),
        "priority": ExactField("priority", as_int=True),
        "assignedToId": ExactField("assigned_to_id", as_int=True),
    },
)


class CaseRepository(QueryRepository[Case]):
    """Repository for Case data access"""

    model_class = Case
    filter_spec = CASE_FILTERS

    def find_page(self, params, tenant_id=None, options=()):
        return super().find_page(params, tenant_id, options or (selectinload(Case.assigned_to),))

    def document_counts(self, case_ids: list[int]) -> dict[int, int]:
        """Number of documents linked to each case"""
        if not case_ids:
            return {}
        rows = self.db.execute(
            select(Document.case_id, func.count())
            .where(Document.case_id.in_(case_ids))
            .group_by(Document.case_id)
        ).all()
        return {case_id: count for case_id, count in rows}

    def status_counts(self, tenant_id: int) -> dict[str, int]:
        rows = self.db.execute(
            select(Case.status, func.count()).where(Case.tenant_id == tenant_id).group_by(Case.status)
        ).all()
        return {status.value: count for status, count in rows}

    def amount_total(self, tenant_id: int) -> float:
        """Sum of case amounts (cases without an amount count as zero)"""
        result = self.db.scalar(select(func.sum(Case.amount)).where(Case.tenant_id == tenant_id))
        return float(result) if result is not None else 0.0
