"""
Custom exception classes for the application.

Validation outcomes are returned as data (ValidationResult). The exceptions
here cover misuse of the editing API and persistence failures.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.
    
    All custom exceptions inherit from this.
    
    Attributes:
        code: Error code (e.g., "FABRIC_NOT_FOUND")
        message: Human-readable message
        details: Additional context
    """
    
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)
    
    def to_dict(self) -> dict:
        """Convert to a serializable error payload."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class NotFoundError(AppError):
    """Addressed item does not exist."""
    
    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Request could not be interpreted."""
    
    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            details=details
        )


class DatabaseError(AppError):
    """Storage operation failed."""
    
    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="DATABASE_ERROR",
            message=f"Database {operation} failed: {message}",
            details={"operation": operation, **(details or {})}
        )


# ===================
# PLAN EDITING
# ===================

class FabricNotFoundError(NotFoundError):
    """Edit addressed a fabric index outside the plan."""
    
    def __init__(self, index: int):
        super().__init__(
            resource="Fabric",
            identifier=str(index),
            code="FABRIC_NOT_FOUND"
        )


class ColorNotFoundError(NotFoundError):
    """Edit addressed a color index outside the fabric."""

    def __init__(self, fabric_index: int, color_index: int):
        super().__init__(
            resource="Color",
            identifier=f"{fabric_index}:{color_index}",
            code="COLOR_NOT_FOUND"
        )


class UnknownEditError(ValidationError):
    """Edit kind has no handler."""

    def __init__(self, kind: str):
        super().__init__(
            code="UNKNOWN_EDIT",
            message=f"Unsupported plan edit: {kind}",
            details={"kind": kind}
        )


# ===================
# SUBMISSIONS
# ===================

class SubmissionStorageError(DatabaseError):
    """Submission list could not be read or written."""

    def __init__(self, operation: str, message: str, location: Optional[str] = None):
        super().__init__(
            operation=operation,
            message=message,
            details={"location": location} if location else None
        )
