"""
Domain layer - Record models, validation, lifecycle, schemas, and enums.
"""

from domain import enums, models, schemas, validation

__all__ = ["enums", "models", "schemas", "validation"]
