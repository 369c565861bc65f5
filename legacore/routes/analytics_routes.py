from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.database import get_db
from legacore.dependencies import get_current_tenant, list_params
from legacore.models.tenant import Tenant
from legacore.services.analytics_service import AnalyticsService
from legacore.schemas.analytics_schemas import AnalyticsCreate, AnalyticsResponse, AnalyticsPage

router = APIRouter()


@router.get("/", response_model=AnalyticsPage)
def list_metrics(
    params: dict = Depends(list_params),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    List metric records, newest first.

    - Filters: period (YYYY-MM), metric
    - `aggregated` groups the returned page by metric name
    """
    return AnalyticsService(db).list_metrics(params, tenant)


@router.post("/", response_model=AnalyticsResponse, status_code=status.HTTP_201_CREATED)
def record_metric(
    metric_data: AnalyticsCreate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).record_metric(metric_data, tenant)
