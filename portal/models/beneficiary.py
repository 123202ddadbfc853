"""
Beneficiary SQLAlchemy model.
Stores registered persons with disabilities and their guardian contact details.
"""
import uuid
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Index
from portal.database import Base
from portal.utils.date_utils import utcnow


def generate_id() -> str:
    return str(uuid.uuid4())


class Beneficiary(Base):
    """
    Beneficiary table model.

    Rows are updated in place and never hard-deleted.
    """
    __tablename__ = "beneficiaries"

    id = Column(String(36), primary_key=True, default=generate_id)

    # Personal
    name = Column(String(100), nullable=False, index=True)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)

    # Disability
    disability_type = Column(String(20), nullable=False)
    disability_percentage = Column(Integer)

    # Guardian
    guardian_name = Column(String(100), nullable=False)
    guardian_phone = Column(String(15), nullable=False)
    guardian_email = Column(String(255))

    # Address
    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    pincode = Column(String(6), nullable=False)

    # Identity numbers
    aadhaar_number = Column(String(12))
    udid_number = Column(String(50))

    notes = Column(Text)

    # Audit
    created_by = Column(String(36))
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_beneficiary_created_at', 'created_at'),
    )

    def __repr__(self):
        return f"<Beneficiary(id={self.id}, name={self.name}, city={self.city})>"
