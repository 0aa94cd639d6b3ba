"""
Repositories for records owned by members and trainers
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError

from app.exceptions import ConstraintViolation, Violation
from repositories.base import BaseRepository
from domain.models import (
    Member,
    Trainer,
    MembershipPlan,
    MembershipPayment,
    CheckIn,
    WorkoutSession,
    FitnessClass,
)
from domain.models.activity import OPEN_VISIT_INDEX
from domain.enums import PaymentStatus
from domain.validation import (
    PAYMENT_RULES,
    CHECK_IN_RULES,
    WORKOUT_SESSION_RULES,
    FITNESS_CLASS_RULES,
)


class PaymentRepository(BaseRepository[MembershipPayment]):
    """Repository for membership payments"""

    rules = PAYMENT_RULES
    unique_fields = ("transaction_id",)
    references = {"member_id": Member, "membership_plan_id": MembershipPlan}

    def __init__(self, db: Session):
        super().__init__(db, MembershipPayment)

    def get_by_member_id(self, member_id: UUID) -> List[MembershipPayment]:
        """All payments of a member, newest first"""
        return (
            self.db.query(MembershipPayment)
            .filter(MembershipPayment.member_id == member_id)
            .order_by(MembershipPayment.payment_date.desc())
            .all()
        )

    def get_overdue(self, as_of: Optional[date] = None) -> List[MembershipPayment]:
        """Pending payments whose due date has passed"""
        as_of = as_of or date.today()
        return (
            self.db.query(MembershipPayment)
            .filter(
                and_(
                    MembershipPayment.status == PaymentStatus.PENDING,
                    MembershipPayment.due_date.isnot(None),
                    MembershipPayment.due_date < as_of,
                )
            )
            .order_by(MembershipPayment.due_date)
            .all()
        )


class CheckInRepository(BaseRepository[CheckIn]):
    """Repository for member check-ins"""

    rules = CHECK_IN_RULES
    references = {"member_id": Member}

    def __init__(self, db: Session):
        super().__init__(db, CheckIn)

    def get_by_member_id(self, member_id: UUID) -> List[CheckIn]:
        return (
            self.db.query(CheckIn)
            .filter(CheckIn.member_id == member_id)
            .order_by(CheckIn.check_in_time.desc())
            .all()
        )

    def get_open_for_member(self, member_id: UUID) -> Optional[CheckIn]:
        """The member's current visit, if they have not checked out"""
        return (
            self.db.query(CheckIn)
            .filter(
                and_(CheckIn.member_id == member_id, CheckIn.check_out_time.is_(None))
            )
            .order_by(CheckIn.check_in_time.desc())
            .first()
        )

    def _integrity_violation(self, error: IntegrityError) -> ConstraintViolation:
        message = str(error.orig).lower()
        if "unique" in message and (
            OPEN_VISIT_INDEX in message or "check_ins.member_id" in message
        ):
            return ConstraintViolation(
                self.kind,
                [Violation("member_id", "open_visit", "Member already has an open check-in")],
            )
        return super()._integrity_violation(error)


class WorkoutSessionRepository(BaseRepository[WorkoutSession]):
    """Repository for workout sessions"""

    rules = WORKOUT_SESSION_RULES
    references = {"member_id": Member, "trainer_id": Trainer}

    def __init__(self, db: Session):
        super().__init__(db, WorkoutSession)

    def get_by_member_id(self, member_id: UUID) -> List[WorkoutSession]:
        return (
            self.db.query(WorkoutSession)
            .filter(WorkoutSession.member_id == member_id)
            .order_by(WorkoutSession.session_date.desc())
            .all()
        )

    def get_by_trainer_id(self, trainer_id: UUID) -> List[WorkoutSession]:
        return (
            self.db.query(WorkoutSession)
            .filter(WorkoutSession.trainer_id == trainer_id)
            .order_by(WorkoutSession.session_date.desc())
            .all()
        )


class FitnessClassRepository(BaseRepository[FitnessClass]):
    """Repository for group fitness classes"""

    rules = FITNESS_CLASS_RULES
    references = {"trainer_id": Trainer}

    def __init__(self, db: Session):
        super().__init__(db, FitnessClass)

    def get_by_trainer_id(self, trainer_id: UUID) -> List[FitnessClass]:
        return (
            self.db.query(FitnessClass)
            .filter(FitnessClass.trainer_id == trainer_id)
            .order_by(FitnessClass.start_time)
            .all()
        )
