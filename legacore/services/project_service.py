from collections.abc import Mapping
from datetime import date

from sqlalchemy.orm import Session

from legacore.core.exceptions import NotFoundException, ValidationException
from legacore.core.pagination import PageRequest
from legacore.models.project import Project
from legacore.models.tenant import Tenant
from legacore.repositories.project_repository import ProjectRepository
from legacore.schemas.project_schemas import ProjectCreate, ProjectUpdate


class ProjectService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProjectRepository(db)

    def list_projects(
        self, params: Mapping[str, str], tenant: Tenant
    ) -> tuple[list[Project], int, PageRequest]:
        return self.repo.find_page(params, tenant.id)

    def get_project(self, project_id: int, tenant: Tenant) -> Project:
        project = self.repo.get_scoped(project_id, tenant.id)
        if not project:
            raise NotFoundException(f"Project {project_id} not found")
        return project

    def create_project(self, data: ProjectCreate, tenant: Tenant) -> Project:
        """Create a project; start_date defaults to today"""
        values = data.model_dump(exclude={"metadata"})
        values["start_date"] = data.start_date or date.today()
        if data.end_date and data.end_date < values["start_date"]:
            raise ValidationException("end_date must not be before start_date")
        project = Project(tenant_id=tenant.id, extra=data.metadata, **values)
        return self.repo.create(project)

    def update_project(self, project_id: int, data: ProjectUpdate, tenant: Tenant) -> Project:
        project = self.get_project(project_id, tenant)
        changes = data.model_dump(exclude_unset=True)

        if "metadata" in changes:
            project.extra = changes.pop("metadata") or {}
        for field, value in changes.items():
            if value is None and field in ("name", "status"):
                continue
            setattr(project, field, value)

        if project.end_date and project.end_date < project.start_date:
            self.db.rollback()
            raise ValidationException("end_date must not be before start_date")
        return self.repo.update(project)
