"""
Document SQLAlchemy model.
Metadata for an uploaded compliance file; the bytes live in blob storage.
"""
import uuid
from sqlalchemy import Column, String, DateTime, BigInteger, Text, ForeignKey, Index
from portal.database import Base
from portal.utils.date_utils import utcnow


class Document(Base):
    """Document metadata table model."""
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    type = Column(String(40), nullable=False, index=True)
    file_path = Column(String(500), nullable=False)
    file_size = Column(BigInteger, nullable=False)
    uploaded_by = Column(String(36), nullable=False, index=True)
    beneficiary_id = Column(String(36), ForeignKey("beneficiaries.id"), index=True)

    # Review
    status = Column(String(20), nullable=False, default="pending")
    notes = Column(Text)

    uploaded_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_document_beneficiary_type', 'beneficiary_id', 'type'),
    )

    def __repr__(self):
        return f"<Document(id={self.id}, type={self.type}, status={self.status})>"
