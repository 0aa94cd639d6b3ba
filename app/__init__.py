"""
App package - Application configuration and error types.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    Violation,
    ServiceValidationError,
    RecordValidationError,
    NotFoundError,
    ConflictError,
    ConstraintViolation,
)

__all__ = [
    "settings",
    "Violation",
    "ServiceValidationError",
    "RecordValidationError",
    "NotFoundError",
    "ConflictError",
    "ConstraintViolation",
]
