"""
Dashboard service - headline counters.
"""
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import func
from portal.models.document import Document
from portal.services.attendance_service import AttendanceService
from portal.services.beneficiary_service import BeneficiaryService
from typing import Dict, Any


class DashboardService:
    """Counters shown on the dashboard cards."""

    def __init__(self, db: Session):
        self.db = db

    def get_stats(self, day: date) -> Dict[str, Any]:
        attendance = AttendanceService(self.db)
        return {
            "date": day,
            "total_beneficiaries": BeneficiaryService(self.db).count(),
            "today_attendance": attendance.count_for_date(day),
            "present_today": attendance.count_for_date(day, present_only=True),
            "total_documents": self.db.query(func.count(Document.id)).scalar() or 0,
        }
