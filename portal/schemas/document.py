"""
Document Pydantic schemas.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import date, datetime
from portal.utils.constants import DocumentStatus


class DocumentRecord(BaseModel):
    """Stored document metadata."""
    id: str
    name: str
    type: str
    file_path: str
    file_size: int
    uploaded_by: str
    beneficiary_id: Optional[str] = None
    status: str
    notes: Optional[str] = None
    uploaded_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DocumentListResponse(BaseModel):
    documents: List[DocumentRecord]
    total_count: int
    filtered_count: int


class DocumentTypeInfo(BaseModel):
    value: str
    label: str
    description: str


class DocumentStatusUpdate(BaseModel):
    """Review decision for a document."""
    status: DocumentStatus
    notes: Optional[str] = Field(None, max_length=1000)


class DocumentStatsResponse(BaseModel):
    """Counts by status and type; completion fields are set for beneficiaries only."""
    total: int
    pending: int
    approved: int
    rejected: int
    by_type: Dict[str, int]
    missing_types: Optional[List[str]] = None
    completed: Optional[int] = None
    total_required: Optional[int] = None
    percentage: Optional[int] = None


class BeneficiaryDocumentSummary(BaseModel):
    """Beneficiary with document completion counts."""
    id: str
    name: str
    date_of_birth: date
    gender: str
    disability_type: str
    guardian_name: str
    city: str
    state: str
    document_count: int
    completed_documents: int
    total_required: int
    percentage: int
    completion_status: str


class BeneficiaryDocumentListResponse(BaseModel):
    beneficiaries: List[BeneficiaryDocumentSummary]
    total_count: int
    completion: str


class DocumentOverviewResponse(BaseModel):
    total_students: int
    students_with_complete_documents: int
    total_documents: int
    pending_documents: int


class DocumentUrlResponse(BaseModel):
    url: str


class DocumentExistsResponse(BaseModel):
    exists: bool
