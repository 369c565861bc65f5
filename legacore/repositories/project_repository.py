from sqlalchemy import select, func

from legacore.core.filters import FilterSpec, ExactField
from legacore.models.project import Project
from legacore.repositories.base import QueryRepository

PROJECT_FILTERS = FilterSpec(
    model=Project,
    search_fields=("name", "description"),
    exact_fields={"status": ExactField("status")},
)


class ProjectRepository(QueryRepository[Project]):
    model_class = Project
    filter_spec = PROJECT_FILTERS

    def status_counts(self, tenant_id: int) -> dict[str, int]:
        rows = self.db.execute(
            select(Project.status, func.count())
            .where(Project.tenant_id == tenant_id)
            .group_by(Project.status)
        ).all()
        return {status: count for status, count in rows}

    def budget_total(self, tenant_id: int) -> float:
        result = self.db.scalar(
            select(func.sum(Project.budget)).where(Project.tenant_id == tenant_id)
        )
        return float(result) if result is not None else 0.0
