"""
CSV report endpoints.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session
from portal.database import get_db
from portal.services.report_service import ReportService
from portal.utils.csv_export import report_filename
from portal.utils.date_utils import utc_today

router = APIRouter()


def _csv_response(content: str, report_type: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(report_type, utc_today())}"'},
    )


@router.get("/beneficiaries.csv")
def download_beneficiaries_report(db: Session = Depends(get_db)):
    """Export the complete list of registered beneficiaries."""
    return _csv_response(ReportService(db).beneficiaries_report(), "beneficiaries")


@router.get("/attendance.csv")
def download_attendance_report(db: Session = Depends(get_db)):
    """Export the latest attendance records with beneficiary details."""
    return _csv_response(ReportService(db).attendance_report(), "attendance")
