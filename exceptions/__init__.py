"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    DatabaseError,

    # Plan editing
    FabricNotFoundError,
    ColorNotFoundError,
    UnknownEditError,

    # Submissions
    SubmissionStorageError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "DatabaseError",

    # Plan editing
    "FabricNotFoundError",
    "ColorNotFoundError",
    "UnknownEditError",

    # Submissions
    "SubmissionStorageError",
]
