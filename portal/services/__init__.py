"""
Services package initialization.
"""
from portal.services.beneficiary_service import BeneficiaryService
from portal.services.attendance_service import AttendanceService
from portal.services.document_service import DocumentService
from portal.services.report_service import ReportService
from portal.services.dashboard_service import DashboardService
from portal.services.storage import BlobStorage

__all__ = [
    "BeneficiaryService",
    "AttendanceService",
    "DocumentService",
    "ReportService",
    "DashboardService",
    "BlobStorage",
]
