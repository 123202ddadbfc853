"""
Schemas package initialization.
"""
from portal.schemas.common import (
    MessageResponse,
    HealthResponse,
)
from portal.schemas.beneficiary import (
    BeneficiaryDraft,
    BeneficiaryRecord,
    BeneficiaryListResponse,
)
from portal.schemas.attendance import (
    AttendanceBeneficiary,
    AttendanceSummary,
    AttendanceDayResponse,
    AttendanceSaveRequest,
    AttendanceSaveResponse,
    MarkAllResponse,
)
from portal.schemas.document import (
    DocumentRecord,
    DocumentListResponse,
    DocumentStatusUpdate,
    DocumentStatsResponse,
    BeneficiaryDocumentSummary,
    DocumentOverviewResponse,
)
from portal.schemas.dashboard import (
    DashboardStatsResponse,
)

__all__ = [
    # Common
    "MessageResponse",
    "HealthResponse",
    # Beneficiary
    "BeneficiaryDraft",
    "BeneficiaryRecord",
    "BeneficiaryListResponse",
    # Attendance
    "AttendanceBeneficiary",
    "AttendanceSummary",
    "AttendanceDayResponse",
    "AttendanceSaveRequest",
    "AttendanceSaveResponse",
    "MarkAllResponse",
    # Document
    "DocumentRecord",
    "DocumentListResponse",
    "DocumentStatusUpdate",
    "DocumentStatsResponse",
    "BeneficiaryDocumentSummary",
    "DocumentOverviewResponse",
    # Dashboard
    "DashboardStatsResponse",
]
