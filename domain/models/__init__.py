"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.member import Member
from domain.models.trainer import Trainer
from domain.models.membership_plan import MembershipPlan, ENTITLEMENT_FLAGS
from domain.models.activity import (
    MembershipPayment,
    CheckIn,
    WorkoutSession,
    FitnessClass,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # Primary records
    "Member",
    "Trainer",
    "MembershipPlan",
    "ENTITLEMENT_FLAGS",
    # Owned records
    "MembershipPayment",
    "CheckIn",
    "WorkoutSession",
    "FitnessClass",
]
