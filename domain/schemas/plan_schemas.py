from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from domain.enums import PlanType, PlanStatus


class MembershipPlanCreate(BaseModel):
    """Schema for creating a membership plan.

    Entitlement flags left out default to gym access only.
    """

    plan_name: Optional[str] = None
    description: Optional[str] = None
    duration_months: Optional[int] = None
    price: Optional[Decimal] = None
    setup_fee: Optional[Decimal] = None
    plan_type: Optional[PlanType] = None
    gym_access: Optional[bool] = None
    pool_access: Optional[bool] = None
    group_classes_included: Optional[bool] = None
    nutrition_consultation: Optional[bool] = None
    locker_included: Optional[bool] = None
    towel_service: Optional[bool] = None
    personal_training_sessions: Optional[int] = None
    guest_passes: Optional[int] = None
    features: Optional[str] = None
    status: Optional[PlanStatus] = None


class MembershipPlanUpdate(MembershipPlanCreate):
    expected_version: Optional[int] = Field(None)


class MembershipPlanResponse(BaseModel):
    id: UUID
    plan_name: str
    description: Optional[str]
    duration_months: int
    price: Decimal
    setup_fee: Optional[Decimal]
    plan_type: Optional[PlanType]
    gym_access: bool
    pool_access: bool
    group_classes_included: bool
    nutrition_consultation: bool
    locker_included: bool
    towel_service: bool
    personal_training_sessions: Optional[int]
    guest_passes: Optional[int]
    features: Optional[str]
    status: PlanStatus
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = {"from_attributes": True}
