"""
Models package initialization.
"""
from portal.models.beneficiary import Beneficiary
from portal.models.attendance import AttendanceRecord
from portal.models.document import Document

__all__ = ["Beneficiary", "AttendanceRecord", "Document"]
