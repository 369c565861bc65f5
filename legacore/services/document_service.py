import logging
from collections.abc import Mapping

from sqlalchemy.orm import Session

from legacore.core.exceptions import NotFoundException
from legacore.core.pagination import PageRequest
from legacore.models.document import Document
from legacore.models.tenant import Tenant
from legacore.repositories.case_repository import CaseRepository
from legacore.repositories.document_repository import DocumentRepository
from legacore.repositories.user_repository import UserRepository
from legacore.schemas.document_schemas import DocumentCreate

logger = logging.getLogger(__name__)


class DocumentService:
    """Service for document metadata"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = DocumentRepository(db)
        self.user_repo = UserRepository(db)
        self.case_repo = CaseRepository(db)

    def list_documents(
        self, params: Mapping[str, str], tenant: Tenant
    ) -> tuple[list[Document], int, PageRequest]:
        return self.repo.find_page(params, tenant.id)

    def create_document(self, data: DocumentCreate, tenant: Tenant) -> Document:
        """
        Record document metadata for the tenant.

        Raises:
            NotFoundException: If the uploader or linked case is not part of this tenant
        """
        if not self.user_repo.get_scoped(data.uploaded_by_id, tenant.id):
            raise NotFoundException(f"User {data.uploaded_by_id} not found")
        if data.case_id is not None and not self.case_repo.get_scoped(data.case_id, tenant.id):
            raise NotFoundException(f"Case {data.case_id} not found")

        values = data.model_dump()
        if not values["filepath"]:
            values["filepath"] = f"/uploads/{tenant.slug}/{data.filename}"

        document = self.repo.create(Document(tenant_id=tenant.id, **values))
        logger.info("Recorded document id=%s for company %s", document.id, tenant.slug)
        return document
