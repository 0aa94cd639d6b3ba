"""
Member record model.
"""

from sqlalchemy import (
    Column,
    String,
    Date,
    Float,
    Integer,
    ForeignKey,
    UUID as SQLUUID,
    Enum as SQLEnum,
)

from domain.models.database import Base
from domain.models.mixins import AuditMixin, PersonMixin
from domain.enums import MemberStatus
from domain.derived import calculate_bmi
from domain.lifecycle import creation_date


class Member(AuditMixin, PersonMixin, Base):
    """
    A gym member.

    Owns payments, check-ins and workout sessions; those rows carry
    ``member_id`` and are removed together with the member. The member
    references at most one membership plan.
    """

    __tablename__ = "members"

    member_id = Column(String(50), unique=True, nullable=False)
    height = Column(Float)  # cm
    weight = Column(Float)  # kg
    fitness_goals = Column(String(1000))
    health_conditions = Column(String(1000))
    emergency_contact_name = Column(String(100))
    emergency_contact_phone = Column(String(16))
    join_date = Column(Date, nullable=False)
    status = Column(SQLEnum(MemberStatus, name="member_status"), nullable=False)
    membership_plan_id = Column(
        SQLUUID(as_uuid=True), ForeignKey("membership_plans.id"), index=True
    )
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __creation_defaults__ = {
        "status": MemberStatus.ACTIVE,
        "join_date": creation_date,
    }

    @property
    def bmi(self):
        return calculate_bmi(self.height, self.weight)

    def __repr__(self) -> str:
        return f"<Member {self.member_id} {self.email}>"
