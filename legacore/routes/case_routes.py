from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.core.pagination import Paginated
from legacore.database import get_db
from legacore.dependencies import get_current_tenant, list_params
from legacore.models.tenant import Tenant
from legacore.services.case_service import CaseService
from legacore.schemas.case_schemas import CaseCreate, CaseUpdate, CaseResponse

router = APIRouter()


@router.get("/", response_model=Paginated[CaseResponse])
def list_cases(
    params: dict = Depends(list_params),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    List the company's cases.

    - Filters: search (title, case number, description), status, priority, assignedToId
    - Sorted newest first; page/limit clamped to 1..100
    """
    items, total, page_request = CaseService(db).list_cases(params, tenant)
    return Paginated[CaseResponse].create(items, total, page_request)


@router.post("/", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
def create_case(
    case_data: CaseCreate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Open a new case.

    - Case number is generated from the company slug
    - assigned_to_id must be a user of the same company
    """
    service = CaseService(db)
    return service.to_response(service.create_case(case_data, tenant))


@router.get("/{case_id}", response_model=CaseResponse)
def get_case(
    case_id: int,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Get a specific case by ID.

    - Returns 404 if the case doesn't exist or belongs to another company
    """
    service = CaseService(db)
    return service.to_response(service.get_case(case_id, tenant))


@router.patch("/{case_id}", response_model=CaseResponse)
def update_case(
    case_id: int,
    case_data: CaseUpdate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    service = CaseService(db)
    return service.to_response(service.update_case(case_id, case_data, tenant))
