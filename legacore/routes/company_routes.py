from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.core.pagination import Paginated
from legacore.database import get_db
from legacore.dependencies import list_params
from legacore.services.tenant_service import TenantService
from legacore.schemas.tenant_schemas import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyListItem,
)

router = APIRouter()


@router.get("/", response_model=Paginated[CompanyListItem])
def list_companies(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    """
    List companies (tenants).

    - Filters: search (name, slug, industry), active
    - Each item carries user/case/document counts
    """
    items, total, page_request = TenantService(db).list_companies(params)
    return Paginated[CompanyListItem].create(items, total, page_request)


@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(company_data: CompanyCreate, db: Session = Depends(get_db)):
    """
    Create a new company.

    - Slug must be URL-safe and is immutable afterwards
    - Returns 409 if the name or slug is taken
    """
    return TenantService(db).create_company(company_data)


@router.get("/{slug}", response_model=CompanyResponse)
def get_company(slug: str, db: Session = Depends(get_db)):
    return TenantService(db).get_company(slug)


@router.patch("/{slug}", response_model=CompanyResponse)
def update_company(slug: str, company_data: CompanyUpdate, db: Session = Depends(get_db)):
    """
    Update company details.

    - Only provided fields are updated (partial update)
    - Slug cannot be changed
    """
    return TenantService(db).update_company(slug, company_data)
