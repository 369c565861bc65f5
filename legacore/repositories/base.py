"""Repository base class for tenant-scoped paginated queries."""

from collections.abc import Mapping
from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from legacore.core.filters import FilterSpec, build_filter, build_ordering
from legacore.core.pagination import PageRequest, paginate
from legacore.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class QueryRepository(Generic[ModelT]):
    """
    Generic repository providing filtered, paginated, sorted reads and
    single-row writes.

    Usage:
        class CaseRepository(QueryRepository[Case]):
            model_class = Case
            filter_spec = CASE_FILTERS

        rows, total, page = CaseRepository(db).find_page(params, tenant.id)
    """

    model_class: type[ModelT]
    filter_spec: FilterSpec

    def __init__(self, db: Session):
        self.db = db

    def find_page(
        self, params: Mapping[str, str], tenant_id: int | None = None, options: tuple = ()
    ) -> tuple[list[ModelT], int, PageRequest]:
        """
        Get one page of rows matching the request parameters.

        Args:
            params: Raw query parameters
            tenant_id: Tenant ID for isolation (None only for global entities)
            options: Loader options (e.g. selectinload) for the page query

        Returns:
            Tuple of (rows, total count under the filter, effective page request)
        """
        page_request = paginate(params)
        predicate = build_filter(self.filter_spec, params, tenant_id)

        total = self.db.scalar(
            select(func.count()).select_from(self.model_class).where(predicate)
        ) or 0

        stmt = (
            select(self.model_class)
            .where(predicate)
            .order_by(*build_ordering(self.filter_spec))
            .limit(page_request.limit)
            .offset(page_request.offset)
        )
        if options:
            stmt = stmt.options(*options)
        rows = list(self.db.scalars(stmt).all())
        return rows, total, page_request

    def get_by_id(self, record_id: int) -> ModelT | None:
        return self.db.get(self.model_class, record_id)

    def get_scoped(self, record_id: int, tenant_id: int) -> ModelT | None:
        """
        Get row by ID, ensuring it belongs to the tenant.

        Returns None if the row doesn't exist or belongs to another tenant.
        """
        return self.db.scalar(
            select(self.model_class).where(
                self.model_class.id == record_id,
                self.model_class.tenant_id == tenant_id,
            )
        )

    def create(self, record: ModelT) -> ModelT:
        """Insert a row and commit"""
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def create_no_commit(self, record: ModelT) -> ModelT:
        """Insert without committing (for atomic ops)"""
        self.db.add(record)
        self.db.flush()
        return record

    def update(self, record: ModelT) -> ModelT:
        """Commit pending changes on an existing row"""
        self.db.commit()
        self.db.refresh(record)
        return record
