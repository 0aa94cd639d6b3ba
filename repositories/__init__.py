"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.member_repository import MemberRepository
from repositories.trainer_repository import TrainerRepository
from repositories.plan_repository import MembershipPlanRepository
from repositories.activity_repository import (
    PaymentRepository,
    CheckInRepository,
    WorkoutSessionRepository,
    FitnessClassRepository,
)

__all__ = [
    "BaseRepository",
    "MemberRepository",
    "TrainerRepository",
    "MembershipPlanRepository",
    "PaymentRepository",
    "CheckInRepository",
    "WorkoutSessionRepository",
    "FitnessClassRepository",
]
