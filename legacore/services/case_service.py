import logging
import random
import time
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from legacore.core.exceptions import DatabaseException, NotFoundException
from legacore.core.pagination import PageRequest
from legacore.models.case import Case
from legacore.models.tenant import Tenant
from legacore.repositories.case_repository import CaseRepository
from legacore.repositories.user_repository import UserRepository
from legacore.schemas.case_schemas import CaseCreate, CaseUpdate, CaseResponse

logger = logging.getLogger(__name__)

CASE_NUMBER_ATTEMPTS = 2


def generate_case_number(tenant_slug: str) -> str:
    """<PREFIX>-<epoch ms>-<0..999>, e.g. HBU-1718000000000-42"""
    prefix = tenant_slug.replace("-", "")[:3].upper()
    return f"{prefix}-{int(time.time() * 1000)}-{random.randint(0, 999)}"


class CaseService:
    """Service layer for case business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.case_repo = CaseRepository(db)
        self.user_repo = UserRepository(db)

    def list_cases(
        self, params: Mapping[str, str], tenant: Tenant
    ) -> tuple[list[CaseResponse], int, PageRequest]:
        """
        Get one page of the tenant's cases with their document counts.

        Returns:
            Tuple of (cases, total, page request)
        """
        cases, total, page_request = self.case_repo.find_page(params, tenant.id)
        doc_counts = self.case_repo.document_counts([c.id for c in cases])
        items = [self._response(case, doc_counts.get(case.id, 0)) for case in cases]
        return items, total, page_request

    @staticmethod
    def _response(case: Case, document_count: int) -> CaseResponse:
        return CaseResponse.model_validate(case).model_copy(
            update={"document_count": document_count}
        )

    def to_response(self, case: Case) -> CaseResponse:
        counts = self.case_repo.document_counts([case.id])
        return self._response(case, counts.get(case.id, 0))

    def get_case(self, case_id: int, tenant: Tenant) -> Case:
        """
        Get case ensuring it belongs to the tenant.

        Raises:
            NotFoundException: If case not found or belongs to another tenant
        """
        case = self.case_repo.get_scoped(case_id, tenant.id)
        if not case:
            raise NotFoundException(f"Case {case_id} not found")
        return case

    def _check_assignee(self, user_id: int | None, tenant: Tenant) -> None:
        if user_id is not None and not self.user_repo.get_scoped(user_id, tenant.id):
            raise NotFoundException(f"User {user_id} not found")

    def create_case(self, data: CaseCreate, tenant: Tenant) -> Case:
        """
        Open a new case for the tenant.

        A case number collision is retried once with a fresh number.

        Raises:
            NotFoundException: If assigned_to_id is not a user of this tenant
            DatabaseException: If every generated case number collided
        """
        self._check_assignee(data.assigned_to_id, tenant)

        for _ in range(CASE_NUMBER_ATTEMPTS):
            case_number = generate_case_number(tenant.slug)
            case = Case(
                case_number=case_number,
                tenant_id=tenant.id,
                **data.model_dump(),
            )
            try:
                case = self.case_repo.create(case)
                break
            except IntegrityError:
                self.db.rollback()
                logger.warning("Case number %s already taken, regenerating", case_number)
        else:
            raise DatabaseException("Could not allocate a unique case number")

        logger.info("Created case %s for company %s", case.case_number, tenant.slug)
        return case

    def update_case(self, case_id: int, data: CaseUpdate, tenant: Tenant) -> Case:
        """Update case fields; only provided fields change"""
        case = self.get_case(case_id, tenant)
        changes = data.model_dump(exclude_unset=True)

        if "assigned_to_id" in changes:
            self._check_assignee(changes["assigned_to_id"], tenant)

        for field, value in changes.items():
            if value is None and field in ("title", "status", "priority", "currency"):
                continue
            setattr(case, field, value)

        return self.case_repo.update(case)
