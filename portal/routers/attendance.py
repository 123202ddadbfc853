"""
Attendance API endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from portal.database import get_db
from portal.dependencies import ActorContext, get_current_actor
from portal.schemas.attendance import (
    AttendanceDayResponse,
    AttendanceSaveRequest,
    AttendanceSaveResponse,
    AttendanceSummary,
    MarkAllResponse,
)
from portal.services.attendance_service import AttendanceService
from datetime import date

router = APIRouter()


@router.post("/mark-all", response_model=MarkAllResponse)
def mark_all_present(db: Session = Depends(get_db)):
    """
    Snapshot with every beneficiary present.

    Replaces any marks in the editor; nothing is stored until the date is saved.
    """
    return AttendanceService(db).mark_all_for_day()


@router.get("/{day}", response_model=AttendanceDayResponse)
def get_attendance(day: date, db: Session = Depends(get_db)):
    """
    Get the attendance sheet for a date.

    Beneficiaries absent from `attendance` are unmarked for that date.
    """
    return AttendanceService(db).get_day(day)


@router.put("/{day}", response_model=AttendanceSaveResponse)
def save_attendance(
    day: date,
    payload: AttendanceSaveRequest,
    actor: ActorContext = Depends(get_current_actor),
    db: Session = Depends(get_db)
):
    """Replace the stored attendance for a date with the submitted snapshot."""
    return AttendanceService(db).save_day(day, payload.attendance, actor, notes=payload.notes)


@router.get("/{day}/summary", response_model=AttendanceSummary)
def get_attendance_summary(day: date, db: Session = Depends(get_db)):
    """Present, absent and unmarked counts for a date."""
    return AttendanceService(db).day_summary(day)
