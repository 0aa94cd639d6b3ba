"""
Domain schemas package - Pydantic models for request parsing and responses.
"""

from domain.schemas.member_schemas import (
    PersonFields,
    MemberCreate,
    MemberUpdate,
    MemberResponse,
)
from domain.schemas.trainer_schemas import (
    TrainerCreate,
    TrainerUpdate,
    TrainerResponse,
)
from domain.schemas.plan_schemas import (
    MembershipPlanCreate,
    MembershipPlanUpdate,
    MembershipPlanResponse,
)
from domain.schemas.activity_schemas import (
    PaymentCreate,
    PaymentUpdate,
    PaymentResponse,
    CheckInCreate,
    CheckOutRequest,
    CheckInResponse,
    WorkoutSessionCreate,
    WorkoutSessionUpdate,
    WorkoutSessionResponse,
    FitnessClassCreate,
    FitnessClassUpdate,
    FitnessClassResponse,
)

__all__ = [
    # Member schemas
    "PersonFields",
    "MemberCreate",
    "MemberUpdate",
    "MemberResponse",
    # Trainer schemas
    "TrainerCreate",
    "TrainerUpdate",
    "TrainerResponse",
    # Plan schemas
    "MembershipPlanCreate",
    "MembershipPlanUpdate",
    "MembershipPlanResponse",
    # Activity schemas
    "PaymentCreate",
    "PaymentUpdate",
    "PaymentResponse",
    "CheckInCreate",
    "CheckOutRequest",
    "CheckInResponse",
    "WorkoutSessionCreate",
    "WorkoutSessionUpdate",
    "WorkoutSessionResponse",
    "FitnessClassCreate",
    "FitnessClassUpdate",
    "FitnessClassResponse",
]
