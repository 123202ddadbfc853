"""
Common Pydantic schemas shared across endpoints.
"""
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    database: str
    storage: str
