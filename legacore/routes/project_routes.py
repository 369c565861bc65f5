from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.core.pagination import Paginated
from legacore.database import get_db
from legacore.dependencies import get_current_tenant, list_params
from legacore.models.tenant import Tenant
from legacore.services.project_service import ProjectService
from legacore.schemas.project_schemas import ProjectCreate, ProjectUpdate, ProjectResponse

router = APIRouter()


@router.get("/", response_model=Paginated[ProjectResponse])
def list_projects(
    params: dict = Depends(list_params),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    projects, total, page_request = ProjectService(db).list_projects(params, tenant)
    items = [ProjectResponse.model_validate(p) for p in projects]
    return Paginated[ProjectResponse].create(items, total, page_request)


@router.post("/", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    project_data: ProjectCreate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Create a project.

    - start_date defaults to today; end_date may not precede it
    """
    return ProjectService(db).create_project(project_data, tenant)


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: int,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    return ProjectService(db).get_project(project_id, tenant)


@router.patch("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Update a project.

    - Only provided fields are updated (partial update)
    """
    return ProjectService(db).update_project(project_id, project_data, tenant)
