import logging
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from legacore.core.exceptions import NotFoundException, ForbiddenException, ConflictException
from legacore.core.pagination import PageRequest
from legacore.models.tenant import Tenant
from legacore.repositories.tenant_repository import TenantRepository
from legacore.schemas.tenant_schemas import (
    CompanyCreate,
    CompanyUpdate,
    CompanyListItem,
    CompanyCounts,
)

logger = logging.getLogger(__name__)


class TenantService:
    """Service layer for tenant resolution and company administration"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)

    def resolve(self, slug: str) -> Tenant:
        """
        Map a tenant slug to its tenant record.

        Read-only and idempotent. Every tenant-scoped operation runs this
        first and aborts before touching any data if it fails.

        Args:
            slug: Tenant slug

        Returns:
            Active tenant

        Raises:
            NotFoundException: If no tenant has this slug
            ForbiddenException: If the tenant is inactive
        """
        tenant = self.tenant_repo.get_by_slug(slug)
        if not tenant:
            raise NotFoundException("Company not found")
        if not tenant.active:
            raise ForbiddenException("Company is inactive")
        return tenant

    def list_companies(
        self, params: Mapping[str, str]
    ) -> tuple[list[CompanyListItem], int, PageRequest]:
        """
        List companies with user/case/document counts.

        Returns:
            Tuple of (items, total, page request)
        """
        tenants, total, page_request = self.tenant_repo.find_page(params)
        counts = self.tenant_repo.member_counts([t.id for t in tenants])
        items = [
            CompanyListItem.model_validate(tenant).model_copy(
                update={"counts": CompanyCounts(**counts[tenant.id])}
            )
            for tenant in tenants
        ]
        return items, total, page_request

    def get_company(self, slug: str) -> Tenant:
        """Get company by slug regardless of active flag"""
        tenant = self.tenant_repo.get_by_slug(slug)
        if not tenant:
            raise NotFoundException("Company not found")
        return tenant

    def create_company(self, data: CompanyCreate) -> Tenant:
        """
        Create a new company.

        Raises:
            ConflictException: If slug or name is already taken
        """
        if self.tenant_repo.get_by_slug_or_name(data.slug, data.name):
            raise ConflictException("Company with this name or slug already exists")

        tenant = Tenant(**data.model_dump())
        try:
            tenant = self.tenant_repo.create(tenant)
        except IntegrityError:
            # Lost a race with a concurrent insert of the same slug/name
            self.db.rollback()
            raise ConflictException("Company with this name or slug already exists")

        logger.info("Created company %s (id=%s)", tenant.slug, tenant.id)
        return tenant

    def update_company(self, slug: str, data: CompanyUpdate) -> Tenant:
        """
        Update company details. The slug never changes.

        Raises:
            NotFoundException: If company not found
            ConflictException: If the new name belongs to another company
        """
        tenant = self.get_company(slug)
        changes = data.model_dump(exclude_unset=True)

        if "name" in changes and changes["name"] != tenant.name:
            existing = self.tenant_repo.get_by_name(changes["name"])
            if existing and existing.id != tenant.id:
                raise ConflictException("Company with this name already exists")

        for field, value in changes.items():
            if value is None and field in ("name", "active"):
                continue
            setattr(tenant, field, value)

        try:
            return self.tenant_repo.update(tenant)
        except IntegrityError:
            self.db.rollback()
            raise ConflictException("Company with this name already exists")
