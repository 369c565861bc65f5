"""Repository for Tenant (company) model operations."""

from sqlalchemy import select, func, or_

from legacore.core.filters import FilterSpec, ExactField
from legacore.models.tenant import Tenant
from legacore.models.user import User
from legacore.models.case import Case
from legacore.models.document import Document
from legacore.repositories.base import QueryRepository

COMPANY_FILTERS = FilterSpec(
    model=Tenant,
    tenant_column=None,
    search_fields=("name", "slug", "industry"),
    exact_fields={"active": ExactField("active", as_bool=True)},
)


class TenantRepository(QueryRepository[Tenant]):
    """Repository for Tenant model operations"""

    model_class = Tenant
    filter_spec = COMPANY_FILTERS

    def get_by_slug(self, slug: str) -> Tenant | None:
        """
        Get tenant by slug.

        Args:
            slug: URL-safe tenant identifier

        Returns:
            Tenant object or None if not found
        """
        return self.db.scalar(select(Tenant).where(Tenant.slug == slug))

    def get_by_name(self, name: str) -> Tenant | None:
        return self.db.scalar(select(Tenant).where(Tenant.name == name))

    def get_by_slug_or_name(self, slug: str, name: str) -> Tenant | None:
        """Find a tenant that would collide with a new (slug, name) pair"""
        return self.db.scalar(select(Tenant).where(or_(Tenant.slug == slug, Tenant.name == name)))

    def member_counts(self, tenant_ids: list[int]) -> dict[int, dict[str, int]]:
        """
        Count users, cases and documents per tenant.

        Args:
            tenant_ids: Tenants to count for

        Returns:
            Mapping tenant_id -> {"users": n, "cases": n, "documents": n}
        """
        counts = {tid: {"users": 0, "cases": 0, "documents": 0} for tid in tenant_ids}
        if not tenant_ids:
            return counts
        for key, model in (("users", User), ("cases", Case), ("documents", Document)):
            rows = self.db.execute(
                select(model.tenant_id, func.count())
                .where(model.tenant_id.in_(tenant_ids))
                .group_by(model.tenant_id)
            ).all()
            for tenant_id, count in rows:
                counts[tenant_id][key] = count
        return counts
