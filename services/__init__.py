"""
Services package - Business logic layer.
"""

from services.member_service import MemberService
from services.trainer_service import TrainerService
from services.plan_service import MembershipPlanService
from services.activity_service import (
    PaymentService,
    CheckInService,
    WorkoutSessionService,
    FitnessClassService,
)

__all__ = [
    "MemberService",
    "TrainerService",
    "MembershipPlanService",
    "PaymentService",
    "CheckInService",
    "WorkoutSessionService",
    "FitnessClassService",
]
