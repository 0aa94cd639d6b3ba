from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from domain.enums import (
    PaymentMethod,
    PaymentStatus,
    SessionStatus,
    ClassType,
    ClassStatus,
)


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------


class PaymentCreate(BaseModel):
    """Schema for recording a membership payment"""

    member_id: Optional[UUID] = None
    membership_plan_id: Optional[UUID] = None
    amount: Optional[Decimal] = None
    payment_date: Optional[date] = None
    due_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None


class PaymentUpdate(BaseModel):
    amount: Optional[Decimal] = None
    due_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    expected_version: Optional[int] = None


class PaymentResponse(BaseModel):
    id: UUID
    member_id: UUID
    membership_plan_id: Optional[UUID]
    amount: Decimal
    payment_date: date
    due_date: Optional[date]
    payment_method: PaymentMethod
    status: PaymentStatus
    transaction_id: Optional[str]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Check-ins
# ---------------------------------------------------------------------------


class CheckInCreate(BaseModel):
    member_id: Optional[UUID] = None
    check_in_time: Optional[datetime] = Field(
        None, description="Defaults to the time the check-in is recorded"
    )
    notes: Optional[str] = None


class CheckOutRequest(BaseModel):
    check_out_time: Optional[datetime] = Field(
        None, description="Defaults to the time the check-out is recorded"
    )


class CheckInResponse(BaseModel):
    id: UUID
    member_id: UUID
    check_in_time: datetime
    check_out_time: Optional[datetime]
    duration_minutes: Optional[int]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Workout sessions
# ---------------------------------------------------------------------------


class WorkoutSessionCreate(BaseModel):
    member_id: Optional[UUID] = None
    trainer_id: Optional[UUID] = None
    session_date: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    workout_type: Optional[str] = None
    calories_burned: Optional[int] = None
    status: Optional[SessionStatus] = None
    notes: Optional[str] = None


class WorkoutSessionUpdate(BaseModel):
    trainer_id: Optional[UUID] = None
    session_date: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    workout_type: Optional[str] = None
    calories_burned: Optional[int] = None
    status: Optional[SessionStatus] = None
    notes: Optional[str] = None
    expected_version: Optional[int] = None


class WorkoutSessionResponse(BaseModel):
    id: UUID
    member_id: UUID
    trainer_id: Optional[UUID]
    session_date: datetime
    duration_minutes: int
    workout_type: str
    calories_burned: Optional[int]
    status: SessionStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Fitness classes
# ---------------------------------------------------------------------------


class FitnessClassCreate(BaseModel):
    trainer_id: Optional[UUID] = None
    class_name: Optional[str] = None
    description: Optional[str] = None
    class_type: Optional[ClassType] = None
    start_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    max_capacity: Optional[int] = None
    room: Optional[str] = None
    status: Optional[ClassStatus] = None


class FitnessClassUpdate(BaseModel):
    class_name: Optional[str] = None
    description: Optional[str] = None
    class_type: Optional[ClassType] = None
    start_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    max_capacity: Optional[int] = None
    room: Optional[str] = None
    status: Optional[ClassStatus] = None
    expected_version: Optional[int] = None


class FitnessClassResponse(BaseModel):
    id: UUID
    trainer_id: UUID
    class_name: str
    description: Optional[str]
    class_type: ClassType
    start_time: datetime
    duration_minutes: int
    max_capacity: int
    room: Optional[str]
    status: ClassStatus
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}
