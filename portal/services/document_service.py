"""
Document service - compliance document uploads, review and completeness.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from portal.config import settings
from portal.dependencies import ActorContext
from portal.exceptions import NotFoundError, StorageError, ValidationError
from portal.models.beneficiary import Beneficiary
from portal.models.document import Document
from portal.services.storage import BlobStorage
from portal.utils.completeness import (
    completion_status,
    compute_completion,
    count_by_status,
    count_by_type,
)
from portal.utils.constants import COMPLETION_FILTERS, DocumentStatus, DocumentType
from portal.utils.date_utils import utcnow
from portal.utils.uploads import build_storage_path, validate_upload

logger = logging.getLogger(__name__)


def filter_documents(
    documents: List[Document],
    search: Optional[str] = None,
    document_type: Optional[str] = None,
    status: Optional[str] = None
) -> List[Document]:
    """Narrow a document list by name substring, type and review status."""
    term = (search or "").lower()
    return [
        doc for doc in documents
        if term in doc.name.lower()
        and (document_type is None or doc.type == document_type)
        and (status is None or doc.status == status)
    ]


class DocumentService:
    """Business logic for document metadata and the documents bucket."""

    def __init__(self, db: Session, storage: BlobStorage):
        self.db = db
        self.storage = storage

    def upload_document(
        self,
        filename: str,
        content: bytes,
        document_type: DocumentType,
        actor: ActorContext,
        beneficiary_id: Optional[str] = None
    ) -> Document:
        """
        Store the file, then insert its metadata row with status ``pending``.

        Constraints are checked before anything is written. If the metadata
        insert fails the stored blob is removed again on a best-effort basis.
        """
        error = validate_upload(filename, len(content), settings.ACCEPTED_FILE_TYPES, settings.MAX_UPLOAD_SIZE_MB)
        if error:
            raise ValidationError(error)

        if beneficiary_id and self.db.get(Beneficiary, beneficiary_id) is None:
            raise NotFoundError(f"Beneficiary {beneficiary_id} not found")

        path = self.storage.upload(build_storage_path(actor.user_id, document_type.value, filename), content)

        document = Document(
            name=filename,
            type=document_type.value,
            file_path=path,
            file_size=len(content),
            uploaded_by=actor.user_id,
            beneficiary_id=beneficiary_id,
            status=DocumentStatus.PENDING.value,
        )
        try:
            self.db.add(document)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception(f"Database error while recording {path}")
            self._delete_file(path)
            raise

        self.db.refresh(document)
        logger.info(f"Document {document.id} ({document.type}) uploaded by {actor.user_id}")
        return document

    def get_document(self, document_id: str) -> Document:
        document = self.db.get(Document, document_id)
        if document is None:
            raise NotFoundError(f"Document {document_id} not found")
        return document

    def list_uploader_documents(self, user_id: str) -> List[Document]:
        """Documents uploaded by a user, newest first."""
        return self.db.query(Document).filter(
            Document.uploaded_by == user_id
        ).order_by(Document.uploaded_at.desc()).all()

    def list_beneficiary_documents(self, beneficiary_id: str) -> List[Document]:
        """Documents attached to a beneficiary, newest first."""
        return self.db.query(Document).filter(
            Document.beneficiary_id == beneficiary_id
        ).order_by(Document.uploaded_at.desc()).all()

    def list_attached_documents(self) -> List[Document]:
        """All documents that belong to some beneficiary."""
        return self.db.query(Document).filter(
            Document.beneficiary_id.isnot(None)
        ).order_by(Document.uploaded_at.desc()).all()

    def get_beneficiary_stats(self, beneficiary_id: str) -> Dict[str, Any]:
        """Status counts, per-type counts and completion for one beneficiary."""
        if self.db.get(Beneficiary, beneficiary_id) is None:
            raise NotFoundError(f"Beneficiary {beneficiary_id} not found")

        documents = self.list_beneficiary_documents(beneficiary_id)
        completion = compute_completion(documents)
        return {
            "total": completion.total,
            **count_by_status(documents),
            "by_type": count_by_type(documents),
            "missing_types": completion.missing_types,
            "completed": completion.completed,
            "total_required": completion.total_required,
            "percentage": completion.percentage,
        }

    def get_uploader_stats(self, user_id: str) -> Dict[str, Any]:
        documents = self.list_uploader_documents(user_id)
        return {
            "total": len(documents),
            **count_by_status(documents),
            "by_type": count_by_type(documents),
        }

    def beneficiaries_with_document_counts(
        self,
        search: Optional[str] = None,
        completion: str = "all"
    ) -> List[Dict[str, Any]]:
        """
        Every beneficiary with its document completion.

        Args:
            search: Case-insensitive match on name, guardian name or city
            completion: all, complete, incomplete or missing

        Returns:
            List of beneficiary summaries ordered by name
        """
        if completion not in COMPLETION_FILTERS:
            raise ValidationError(f"completion must be one of: {', '.join(COMPLETION_FILTERS)}")

        beneficiaries = self.db.query(Beneficiary).order_by(Beneficiary.name).all()

        docs_by_beneficiary: Dict[str, List[Document]] = {}
        for doc in self.list_attached_documents():
            docs_by_beneficiary.setdefault(doc.beneficiary_id, []).append(doc)

        term = (search or "").lower()
        results = []
        for b in beneficiaries:
            if term and not any(term in value.lower() for value in (b.name, b.guardian_name, b.city)):
                continue

            stats = compute_completion(docs_by_beneficiary.get(b.id, []))
            status = completion_status(stats.percentage)
            if completion != "all" and status != completion:
                continue

            results.append({
                "id": b.id,
                "name": b.name,
                "date_of_birth": b.date_of_birth,
                "gender": b.gender,
                "disability_type": b.disability_type,
                "guardian_name": b.guardian_name,
                "city": b.city,
                "state": b.state,
                "document_count": stats.total,
                "completed_documents": stats.completed,
                "total_required": stats.total_required,
                "percentage": stats.percentage,
                "completion_status": status,
            })

        return results

    def overview(self) -> Dict[str, int]:
        """Portfolio-wide document counters."""
        summaries = self.beneficiaries_with_document_counts()
        documents = self.list_attached_documents()
        return {
            "total_students": len(summaries),
            "students_with_complete_documents": sum(
                1 for s in summaries if s["completed_documents"] == s["total_required"]
            ),
            "total_documents": len(documents),
            "pending_documents": sum(1 for d in documents if d.status == DocumentStatus.PENDING.value),
        }

    def download(self, document_id: str) -> bytes:
        return self.storage.download(self.get_document(document_id).file_path)

    def public_url(self, document_id: str) -> str:
        return self.storage.public_url(self.get_document(document_id).file_path)

    def update_status(self, document_id: str, status: DocumentStatus, notes: Optional[str] = None) -> Document:
        """Record a review decision."""
        document = self.get_document(document_id)
        document.status = status.value
        document.notes = notes or None
        document.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(document)
        logger.info(f"Document {document_id} marked {status.value}")
        return document

    def delete_document(self, document_id: str) -> None:
        """Remove the blob, then the metadata row."""
        document = self.get_document(document_id)
        self._delete_file(document.file_path)
        self.db.delete(document)
        self.db.commit()
        logger.info(f"Document {document_id} deleted")

    def document_exists(
        self,
        user_id: str,
        document_type: DocumentType,
        beneficiary_id: Optional[str] = None
    ) -> bool:
        query = self.db.query(Document.id).filter(
            Document.uploaded_by == user_id,
            Document.type == document_type.value
        )
        if beneficiary_id:
            query = query.filter(Document.beneficiary_id == beneficiary_id)
        return query.first() is not None

    def _delete_file(self, path: str) -> None:
        # The blob may already be gone; never block the caller on it
        try:
            self.storage.remove([path])
        except StorageError as e:
            logger.error(f"Failed to delete file from storage: {e.message}")
