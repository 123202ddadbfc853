"""
Document API endpoints.
"""
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session
from portal.config import settings
from portal.database import get_db
from portal.dependencies import ActorContext, get_current_actor
from portal.exceptions import ValidationError
from portal.schemas.common import MessageResponse
from portal.schemas.document import (
    BeneficiaryDocumentListResponse,
    DocumentExistsResponse,
    DocumentListResponse,
    DocumentOverviewResponse,
    DocumentRecord,
    DocumentStatsResponse,
    DocumentStatusUpdate,
    DocumentTypeInfo,
    DocumentUrlResponse,
)
from portal.services.document_service import DocumentService, filter_documents
from portal.services.storage import BlobStorage, get_storage
from portal.utils.constants import (
    DOCUMENT_TYPE_DESCRIPTIONS,
    DOCUMENT_TYPE_LABELS,
    DocumentStatus,
    DocumentType,
)
from portal.utils.uploads import validate_upload
from typing import List, Optional
from urllib.parse import quote

router = APIRouter()


def get_document_service(
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage)
) -> DocumentService:
    return DocumentService(db, storage)


def _list_response(documents, search, document_type, status):
    filtered = filter_documents(
        documents,
        search=search,
        document_type=document_type.value if document_type else None,
        status=status.value if status else None,
    )
    return {
        "documents": filtered,
        "total_count": len(documents),
        "filtered_count": len(filtered),
    }


@router.get("/types", response_model=List[DocumentTypeInfo])
def get_document_types():
    """Required document types with labels and descriptions."""
    return [
        {
            "value": t.value,
            "label": DOCUMENT_TYPE_LABELS[t.value],
            "description": DOCUMENT_TYPE_DESCRIPTIONS[t.value],
        }
        for t in DocumentType
    ]


@router.post("", response_model=DocumentRecord, status_code=201)
def upload_document(
    file: UploadFile = File(...),
    document_type: DocumentType = Form(...),
    beneficiary_id: Optional[str] = Form(None),
    actor: ActorContext = Depends(get_current_actor),
    service: DocumentService = Depends(get_document_service)
):
    """
    Upload a document.

    The file extension must be one of the accepted types and the size must
    not exceed the configured ceiling; rejected files are never stored.
    """
    error = validate_upload(
        file.filename or "",
        file.size or 0,
        settings.ACCEPTED_FILE_TYPES,
        settings.MAX_UPLOAD_SIZE_MB,
    )
    if error:
        raise ValidationError(error)

    # never buffer more than one byte past the ceiling
    content = file.file.read(settings.max_upload_bytes + 1)
    return service.upload_document(
        filename=file.filename or "",
        content=content,
        document_type=document_type,
        actor=actor,
        beneficiary_id=beneficiary_id or None,
    )


@router.get("/mine", response_model=DocumentListResponse)
def get_my_documents(
    search: Optional[str] = Query(None, description="Filter by file name"),
    document_type: Optional[DocumentType] = Query(None, alias="type"),
    status: Optional[DocumentStatus] = Query(None),
    actor: ActorContext = Depends(get_current_actor),
    service: DocumentService = Depends(get_document_service)
):
    """Documents uploaded by the signed-in user."""
    documents = service.list_uploader_documents(actor.user_id)
    return _list_response(documents, search, document_type, status)


@router.get("/mine/stats", response_model=DocumentStatsResponse)
def get_my_document_stats(
    actor: ActorContext = Depends(get_current_actor),
    service: DocumentService = Depends(get_document_service)
):
    """Status and type counts for the signed-in user's uploads."""
    return service.get_uploader_stats(actor.user_id)


@router.get("/exists", response_model=DocumentExistsResponse)
def check_document_exists(
    document_type: DocumentType = Query(..., alias="type"),
    beneficiary_id: Optional[str] = Query(None),
    actor: ActorContext = Depends(get_current_actor),
    service: DocumentService = Depends(get_document_service)
):
    """Whether the signed-in user already uploaded a document of this type."""
    return {"exists": service.document_exists(actor.user_id, document_type, beneficiary_id)}


@router.get("/overview", response_model=DocumentOverviewResponse)
def get_document_overview(service: DocumentService = Depends(get_document_service)):
    """Counters for the student documents page."""
    return service.overview()


@router.get("/beneficiaries", response_model=BeneficiaryDocumentListResponse)
def get_beneficiaries_with_document_counts(
    search: Optional[str] = Query(None, description="Match name, guardian name or city"),
    completion: str = Query("all", pattern="^(all|complete|incomplete|missing)$"),
    service: DocumentService = Depends(get_document_service)
):
    """
    Beneficiaries with document completion.

    - **completion**: `complete` (100%), `incomplete` (between 0 and 100%),
      `missing` (no required document) or `all`
    """
    beneficiaries = service.beneficiaries_with_document_counts(search=search, completion=completion)
    return {
        "beneficiaries": beneficiaries,
        "total_count": len(beneficiaries),
        "completion": completion,
    }


@router.get("/beneficiaries/{beneficiary_id}", response_model=DocumentListResponse)
def get_beneficiary_documents(
    beneficiary_id: str,
    search: Optional[str] = Query(None, description="Filter by file name"),
    document_type: Optional[DocumentType] = Query(None, alias="type"),
    status: Optional[DocumentStatus] = Query(None),
    service: DocumentService = Depends(get_document_service)
):
    """Documents attached to a beneficiary, newest first."""
    documents = service.list_beneficiary_documents(beneficiary_id)
    return _list_response(documents, search, document_type, status)


@router.get("/beneficiaries/{beneficiary_id}/stats", response_model=DocumentStatsResponse)
def get_beneficiary_document_stats(
    beneficiary_id: str,
    service: DocumentService = Depends(get_document_service)
):
    """Completion of the required document set for a beneficiary."""
    return service.get_beneficiary_stats(beneficiary_id)


@router.get("/{document_id}", response_model=DocumentRecord)
def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    return service.get_document(document_id)


@router.get("/{document_id}/download")
def download_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """Download the stored file."""
    document = service.get_document(document_id)
    content = service.download(document_id)
    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(document.name)}"},
    )


@router.get("/{document_id}/url", response_model=DocumentUrlResponse)
def get_document_url(document_id: str, service: DocumentService = Depends(get_document_service)):
    """Public URL for previewing the file."""
    return {"url": service.public_url(document_id)}


@router.patch("/{document_id}/status", response_model=DocumentRecord)
def update_document_status(
    document_id: str,
    payload: DocumentStatusUpdate,
    actor: ActorContext = Depends(get_current_actor),
    service: DocumentService = Depends(get_document_service)
):
    """Record a review decision for a document."""
    return service.update_status(document_id, payload.status, payload.notes)


@router.delete("/{document_id}", response_model=MessageResponse)
def delete_document(
    document_id: str,
    actor: ActorContext = Depends(get_current_actor),
    service: DocumentService = Depends(get_document_service)
):
    """Delete a document and its stored file."""
    service.delete_document(document_id)
    return {"message": "Document deleted successfully"}
