"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.record_mapper import RecordMapper, normalize_email, column_names

__all__ = ["RecordMapper", "normalize_email", "column_names"]
