from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from legacore.database import get_db
from legacore.dependencies import get_current_tenant
from legacore.models.tenant import Tenant
from legacore.services.dashboard_service import DashboardService
from legacore.schemas.dashboard_schemas import DashboardResponse

router = APIRouter()


@router.get("/", response_model=DashboardResponse)
def get_dashboard(tenant: Tenant = Depends(get_current_tenant), db: Session = Depends(get_db)):
    """Summary of the company's cases, documents, projects and credits"""
    return DashboardService(db).get_dashboard(tenant)
