"""
Records owned by members and trainers: payments, check-ins, workout
sessions and fitness classes.
"""

from sqlalchemy import (
    Column,
    String,
    Text,
    Date,
    DateTime,
    Integer,
    Numeric,
    ForeignKey,
    CheckConstraint,
    Index,
    text,
    UUID as SQLUUID,
    Enum as SQLEnum,
)

from domain.models.database import Base
from domain.models.mixins import AuditMixin
from domain.enums import (
    PaymentMethod,
    PaymentStatus,
    SessionStatus,
    ClassType,
    ClassStatus,
)
from domain.lifecycle import creation_date, creation_time

OPEN_VISIT_INDEX = "uq_check_ins_open_member"


class MembershipPayment(AuditMixin, Base):
    """Money received from a member, optionally for a specific plan"""

    __tablename__ = "membership_payments"

    member_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    membership_plan_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("membership_plans.id", ondelete="SET NULL"),
    )
    amount = Column(Numeric(10, 2), nullable=False)
    payment_date = Column(Date, nullable=False)
    due_date = Column(Date)
    payment_method = Column(SQLEnum(PaymentMethod, name="payment_method"), nullable=False)
    status = Column(SQLEnum(PaymentStatus, name="payment_status"), nullable=False)
    transaction_id = Column(String(100), unique=True)
    notes = Column(String(500))
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_payment_amount_positive"),
    )

    __creation_defaults__ = {
        "status": PaymentStatus.PENDING,
        "payment_date": creation_date,
    }


class CheckIn(AuditMixin, Base):
    """A member's visit to the center"""

    __tablename__ = "check_ins"

    member_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    check_in_time = Column(DateTime, nullable=False)
    check_out_time = Column(DateTime)
    notes = Column(String(500))
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    # At most one open visit per member
    __table_args__ = (
        Index(
            OPEN_VISIT_INDEX,
            "member_id",
            unique=True,
            sqlite_where=text("check_out_time IS NULL"),
            postgresql_where=text("check_out_time IS NULL"),
        ),
    )

    __creation_defaults__ = {
        "check_in_time": creation_time,
    }

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None

    @property
    def duration_minutes(self):
        """Whole minutes between check-in and check-out, None while still inside"""
        if self.check_in_time is None or self.check_out_time is None:
            return None
        return int((self.check_out_time - self.check_in_time).total_seconds() // 60)


class WorkoutSession(AuditMixin, Base):
    """
    A training session for a member, optionally led by a trainer.

    Owned by both sides: removing either the member or the trainer removes
    the session.
    """

    __tablename__ = "workout_sessions"

    member_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    trainer_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("trainers.id", ondelete="CASCADE"),
        index=True,
    )
    session_date = Column(DateTime, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    workout_type = Column(String(100), nullable=False)
    calories_burned = Column(Integer)
    status = Column(SQLEnum(SessionStatus, name="session_status"), nullable=False)
    notes = Column(Text)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __creation_defaults__ = {
        "status": SessionStatus.SCHEDULED,
    }


class FitnessClass(AuditMixin, Base):
    """A scheduled group class run by a trainer"""

    __tablename__ = "fitness_classes"

    trainer_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("trainers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    class_name = Column(String(100), nullable=False)
    description = Column(String(1000))
    class_type = Column(SQLEnum(ClassType, name="class_type"), nullable=False)
    start_time = Column(DateTime, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    max_capacity = Column(Integer, nullable=False)
    room = Column(String(100))
    status = Column(SQLEnum(ClassStatus, name="class_status"), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("max_capacity >= 1", name="ck_class_capacity_min"),
    )

    __creation_defaults__ = {
        "status": ClassStatus.SCHEDULED,
    }
