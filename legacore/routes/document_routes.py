from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.core.pagination import Paginated
from legacore.database import get_db
from legacore.dependencies import get_current_tenant, list_params
from legacore.models.tenant import Tenant
from legacore.services.document_service import DocumentService
from legacore.schemas.document_schemas import DocumentCreate, DocumentResponse

router = APIRouter()


@router.get("/", response_model=Paginated[DocumentResponse])
def list_documents(
    params: dict = Depends(list_params),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    List the company's documents.

    - Filters: search (title, filename), type, caseId
    - Each item includes the uploader
    """
    documents, total, page_request = DocumentService(db).list_documents(params, tenant)
    items = [DocumentResponse.model_validate(doc) for doc in documents]
    return Paginated[DocumentResponse].create(items, total, page_request)


@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
def create_document(
    document_data: DocumentCreate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """
    Register document metadata.

    - uploaded_by_id and case_id must belong to the same company
    - No file content is stored
    """
    return DocumentService(db).create_document(document_data, tenant)
