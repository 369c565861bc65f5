from fastapi import Depends, Request
from sqlalchemy.orm import Session

from legacore.config import settings
from legacore.database import get_db
from legacore.models.tenant import Tenant
from legacore.services.tenant_service import TenantService


def list_params(request: Request) -> dict[str, str]:
    """Raw query parameters for list endpoints (page, limit, filters)"""
    return dict(request.query_params)


def get_tenant_slug() -> str:
    """Slug of the tenant this deployment serves"""
    return settings.TENANT_SLUG


def get_current_tenant(
    slug: str = Depends(get_tenant_slug), db: Session = Depends(get_db)
) -> Tenant:
    """
    FastAPI dependency resolving the served tenant.

    Runs before any tenant-scoped handler, so an unknown or inactive tenant
    aborts the request before anything is read or written.

    Raises:
        NotFoundException: If no company has this slug
        ForbiddenException: If the company is inactive
    """
    return TenantService(db).resolve(slug)
