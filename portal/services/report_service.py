"""
Report service - CSV exports of beneficiaries and attendance.
"""
import logging
from sqlalchemy.orm import Session, joinedload
from portal.config import settings
from portal.exceptions import EmptyReportError
from portal.models.attendance import AttendanceRecord
from portal.models.beneficiary import Beneficiary
from portal.utils.csv_export import records_to_csv
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

BENEFICIARY_COLUMNS = [column.name for column in Beneficiary.__table__.columns]


class ReportService:
    """Builds downloadable CSV reports."""

    def __init__(self, db: Session):
        self.db = db

    def beneficiary_rows(self) -> List[Dict[str, Any]]:
        beneficiaries = self.db.query(Beneficiary).order_by(Beneficiary.name).all()
        return [
            {column: getattr(b, column) for column in BENEFICIARY_COLUMNS}
            for b in beneficiaries
        ]

    def attendance_rows(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Latest attendance records flattened with beneficiary details."""
        records = self.db.query(AttendanceRecord).options(
            joinedload(AttendanceRecord.beneficiary)
        ).order_by(
            AttendanceRecord.date.desc()
        ).limit(limit or settings.ATTENDANCE_REPORT_LIMIT).all()

        return [{
            "date": r.date,
            "beneficiary_name": r.beneficiary.name if r.beneficiary else None,
            "disability_type": r.beneficiary.disability_type if r.beneficiary else None,
            "present": "Yes" if r.present else "No",
            "notes": r.notes or "",
        } for r in records]

    def beneficiaries_report(self) -> str:
        return self._render("beneficiaries", self.beneficiary_rows())

    def attendance_report(self) -> str:
        return self._render("attendance", self.attendance_rows())

    def _render(self, report_type: str, rows: List[Dict[str, Any]]) -> str:
        if not rows:
            raise EmptyReportError("No data to export")
        logger.info(f"Generated {report_type} report with {len(rows)} rows")
        return records_to_csv(rows)
