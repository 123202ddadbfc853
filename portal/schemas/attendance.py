"""
Attendance Pydantic schemas.
"""
from pydantic import BaseModel, Field
from typing import Dict, List
from datetime import date


class AttendanceBeneficiary(BaseModel):
    """Beneficiary row shown on the attendance sheet."""
    id: str
    name: str
    disability_type: str

    class Config:
        from_attributes = True


class AttendanceSummary(BaseModel):
    total: int
    present: int
    absent: int
    unmarked: int


class AttendanceDayResponse(BaseModel):
    """Snapshot for one date. Beneficiaries missing from ``attendance`` are unmarked."""
    date: date
    beneficiaries: List[AttendanceBeneficiary]
    attendance: Dict[str, bool]
    summary: AttendanceSummary


class AttendanceSaveRequest(BaseModel):
    """Explicit marks for the date; omitted beneficiaries stay unmarked."""
    attendance: Dict[str, bool] = Field(default_factory=dict)
    notes: Dict[str, str] = Field(default_factory=dict)


class AttendanceSaveResponse(BaseModel):
    date: date
    saved: int
    summary: AttendanceSummary


class MarkAllResponse(BaseModel):
    attendance: Dict[str, bool]
    summary: AttendanceSummary
