"""
Domain exceptions raised by services and rendered by the API error handlers.
"""


class PortalError(Exception):
    """Base exception for failures reported back to the portal user."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PortalError):
    """Raised when input data is invalid or violates domain rules."""
    status_code = 400


class AuthenticationError(PortalError):
    """Raised when no authenticated session is present."""
    status_code = 401


class NotFoundError(PortalError):
    """Raised when a requested record does not exist."""
    status_code = 404


class StorageError(PortalError):
    """Raised when the blob store rejects an operation."""
    status_code = 502


class EmptyReportError(PortalError):
    """Raised when a report has no rows to export."""
    status_code = 404
