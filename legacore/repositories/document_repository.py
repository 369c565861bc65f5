from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from legacore.core.filters import FilterSpec, ExactField
from legacore.models.document import Document
from legacore.models.enums import DocumentType
from legacore.repositories.base import QueryRepository

DOCUMENT_FILTERS = FilterSpec(
    model=Document,
    search_fields=("title", "filename"),
    exact_fields={
        "type": ExactField("type", enum=DocumentType),
        "caseId": ExactField("case_id", as_int=True),
    },
)


class DocumentRepository(QueryRepository[Document]):
    model_class = Document
    filter_spec = DOCUMENT_FILTERS

    def find_page(self, params, tenant_id=None, options=()):
        return super().find_page(params, tenant_id, options or (selectinload(Document.uploaded_by),))

    def type_counts(self, tenant_id: int) -> dict[str, int]:
        rows = self.db.execute(
            select(Document.type, func.count())
            .where(Document.tenant_id == tenant_id)
            .group_by(Document.type)
        ).all()
        return {doc_type.value: count for doc_type, count in rows}

    def total_size(self, tenant_id: int) -> int:
        result = self.db.scalar(
            select(func.sum(Document.filesize)).where(Document.tenant_id == tenant_id)
        )
        return int(result) if result is not None else 0
