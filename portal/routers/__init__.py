"""
Routers package initialization.
"""
from portal.routers import beneficiaries
from portal.routers import attendance
from portal.routers import documents
from portal.routers import reports
from portal.routers import dashboard

__all__ = [
    "beneficiaries",
    "attendance",
    "documents",
    "reports",
    "dashboard",
]
