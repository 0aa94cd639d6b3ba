from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from uuid import UUID

from domain.enums import Gender, MemberStatus


class PersonFields(BaseModel):
    """Personal details shared by member and trainer payloads.

    Only types are enforced here; field rules (lengths, formats, required
    fields) are checked by the domain validator so that every failing field
    is reported together.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    gender: Optional[Gender] = None
    profile_image_url: Optional[str] = None


class MemberCreate(PersonFields):
    """Schema for creating a member. Omitted status/join_date are defaulted."""

    member_id: Optional[str] = None
    height: Optional[float] = Field(None, description="Height in cm")
    weight: Optional[float] = Field(None, description="Weight in kg")
    fitness_goals: Optional[str] = None
    health_conditions: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    join_date: Optional[date] = None
    status: Optional[MemberStatus] = None
    membership_plan_id: Optional[UUID] = None


class MemberUpdate(MemberCreate):
    """Partial update; only fields present in the payload are changed."""

    expected_version: Optional[int] = Field(
        None, description="Reject the update if the stored version differs"
    )


class MemberResponse(BaseModel):
    id: UUID
    member_id: str
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
    height: Optional[float]
    weight: Optional[float]
    bmi: Optional[float]
    fitness_goals: Optional[str]
    health_conditions: Optional[str]
    emergency_contact_name: Optional[str]
    emergency_contact_phone: Optional[str]
    join_date: date
    status: MemberStatus
    profile_image_url: Optional[str]
    membership_plan_id: Optional[UUID]
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}
