"""
Column groups shared by several record kinds.
"""

from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    UUID as SQLUUID,
    Enum as SQLEnum,
)
from sqlalchemy.orm import validates
import uuid

from domain.enums import Gender
from domain.mappers.record_mapper import normalize_email
from domain.derived import full_name, calculate_age


class AuditMixin:
    """Surrogate id plus creation/update timestamps."""

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)


class PersonMixin:
    """Personal details shared by members and trainers"""

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone_number = Column(String(16), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    address = Column(String(500), nullable=False)
    city = Column(String(100))
    state = Column(String(100))
    postal_code = Column(String(20))
    gender = Column(SQLEnum(Gender, name="gender"))
    profile_image_url = Column(String(500))

    @validates("email")
    def _normalize_email(self, key, value):
        """Emails are stored trimmed and lower-cased however the record is built."""
        return normalize_email(value)

    @property
    def full_name(self) -> str:
        return full_name(self.first_name, self.last_name)

    @property
    def age(self):
        return calculate_age(self.date_of_birth)
