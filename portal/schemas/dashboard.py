"""
Dashboard Pydantic schemas.
"""
from pydantic import BaseModel
from datetime import date


class DashboardStatsResponse(BaseModel):
    """Headline counters for the dashboard cards."""
    date: date
    total_beneficiaries: int
    today_attendance: int
    present_today: int
    total_documents: int
