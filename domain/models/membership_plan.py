"""
Membership plan record model.
"""

from sqlalchemy import (
    Column,
    String,
    Boolean,
    Integer,
    Numeric,
    CheckConstraint,
    Enum as SQLEnum,
)

from domain.models.database import Base
from domain.models.mixins import AuditMixin
from domain.enums import PlanType, PlanStatus


ENTITLEMENT_FLAGS = (
    "gym_access",
    "pool_access",
    "group_classes_included",
    "nutrition_consultation",
    "locker_included",
    "towel_service",
)


class MembershipPlan(AuditMixin, Base):
    """
    A plan members subscribe to.

    Members point at the plan through ``members.membership_plan_id``; the
    plan itself keeps no list of them.
    """

    __tablename__ = "membership_plans"

    plan_name = Column(String(100), nullable=False)
    description = Column(String(1000))
    duration_months = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    setup_fee = Column(Numeric(8, 2))
    plan_type = Column(SQLEnum(PlanType, name="plan_type"))
    gym_access = Column(Boolean, nullable=False)
    pool_access = Column(Boolean, nullable=False)
    group_classes_included = Column(Boolean, nullable=False)
    nutrition_consultation = Column(Boolean, nullable=False)
    locker_included = Column(Boolean, nullable=False)
    towel_service = Column(Boolean, nullable=False)
    personal_training_sessions = Column(Integer)
    guest_passes = Column(Integer)
    features = Column(String(1000))
    status = Column(SQLEnum(PlanStatus, name="plan_status"), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_plan_price_positive"),
        CheckConstraint("duration_months >= 1", name="ck_plan_duration_min"),
    )

    __creation_defaults__ = {
        "status": PlanStatus.ACTIVE,
        "gym_access": True,
        "pool_access": False,
        "group_classes_included": False,
        "nutrition_consultation": False,
        "locker_included": False,
        "towel_service": False,
    }

    def entitlements(self) -> dict:
        """Boolean entitlement flags keyed by name"""
        return {flag: bool(getattr(self, flag)) for flag in ENTITLEMENT_FLAGS}

    def __repr__(self) -> str:
        return f"<MembershipPlan {self.plan_name} {self.plan_type}>"
