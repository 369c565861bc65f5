from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from legacore.models.enums import DocumentType
from legacore.schemas.user_schemas import UserSummary


class DocumentCreate(BaseModel):
    """Document metadata. File bytes are stored elsewhere."""

    title: str = Field(..., min_length=1, max_length=255)
    uploaded_by_id: int = Field(..., gt=0)
    description: str | None = None
    type: DocumentType = DocumentType.OTHER
    filename: str = Field(default="document.pdf", min_length=1, max_length=255)
    filepath: str | None = Field(None, max_length=500)
    filesize: int = Field(default=0, ge=0)
    mime_type: str = Field(default="application/pdf", max_length=100)
    url: str | None = Field(None, max_length=500)
    case_id: int | None = None


class DocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    type: DocumentType
    filename: str
    filepath: str
    filesize: int
    mime_type: str
    url: str | None
    tenant_id: int
    case_id: int | None
    uploaded_by_id: int
    uploaded_by: UserSummary | None = None
    created_at: datetime
    updated_at: datetime
