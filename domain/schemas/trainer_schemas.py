from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from domain.enums import Gender, TrainerStatus
from domain.schemas.member_schemas import PersonFields


class TrainerCreate(PersonFields):
    """Schema for creating a trainer. Omitted status/hire_date are defaulted."""

    trainer_id: Optional[str] = None
    certification: Optional[str] = None
    years_experience: Optional[int] = None
    specialization: Optional[str] = None
    bio: Optional[str] = None
    hourly_rate: Optional[Decimal] = Field(None, description="Rate per hour, 2 decimals")
    hire_date: Optional[date] = None
    status: Optional[TrainerStatus] = None
    availability_schedule: Optional[str] = None


class TrainerUpdate(TrainerCreate):
    expected_version: Optional[int] = None


class TrainerResponse(BaseModel):
    id: UUID
    trainer_id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone_number: str
    date_of_birth: date
    age: Optional[int]
    address: str
    city: Optional[str]
    state: Optional[str]
    postal_code: Optional[str]
    gender: Optional[Gender]
    certification: str
    years_experience: int
    specialization: str
    bio: Optional[str]
    hourly_rate: Decimal
    hire_date: date
    status: TrainerStatus
    availability_schedule: Optional[str]
    profile_image_url: Optional[str]
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}
