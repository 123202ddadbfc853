"""
Attendance SQLAlchemy model.
One row ties a beneficiary to a calendar date with a present flag.
"""
import uuid
from sqlalchemy import Column, String, Date, DateTime, Boolean, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from portal.database import Base
from portal.utils.date_utils import utcnow


class AttendanceRecord(Base):
    """
    Attendance table model.

    At most one record per (beneficiary_id, date).
    """
    __tablename__ = "attendance"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    beneficiary_id = Column(String(36), ForeignKey("beneficiaries.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    present = Column(Boolean, nullable=False, default=False)
    notes = Column(Text)
    marked_by = Column(String(36))
    created_at = Column(DateTime, nullable=False, default=utcnow)

    beneficiary = relationship("Beneficiary")

    __table_args__ = (
        UniqueConstraint('beneficiary_id', 'date', name='uq_attendance_beneficiary_date'),
    )

    def __repr__(self):
        return f"<AttendanceRecord(beneficiary_id={self.beneficiary_id}, date={self.date}, present={self.present})>"
