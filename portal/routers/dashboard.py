"""
Dashboard API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from portal.database import get_db
from portal.schemas.dashboard import DashboardStatsResponse
from portal.services.dashboard_service import DashboardService
from portal.utils.date_utils import today
from datetime import date
from typing import Optional

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(
    day: Optional[date] = Query(None, description="Defaults to today"),
    db: Session = Depends(get_db)
):
    """Total beneficiaries, attendance marked and present for the day, and total documents."""
    return DashboardService(db).get_stats(day or today())
