"""
Services for records owned by members and trainers.
"""

from typing import List, Optional
from uuid import UUID
from datetime import date, datetime
from sqlalchemy.orm import Session
import logging

from domain.models import MembershipPayment, CheckIn, WorkoutSession, FitnessClass
from domain.mappers import RecordMapper
from domain.lifecycle import now
from domain.schemas.activity_schemas import (
    PaymentCreate,
    PaymentUpdate,
    CheckInCreate,
    WorkoutSessionCreate,
    WorkoutSessionUpdate,
    FitnessClassCreate,
    FitnessClassUpdate,
)
from repositories import (
    PaymentRepository,
    CheckInRepository,
    WorkoutSessionRepository,
    FitnessClassRepository,
)
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("fitnesscenter.activity")


class PaymentService:
    """Business logic for membership payments"""

    @staticmethod
    def record_payment(db: Session, payment_data: PaymentCreate) -> MembershipPayment:
        """Record a payment; status defaults to PENDING and payment date to today."""
        values = RecordMapper.to_changes(payment_data)
        payment = PaymentRepository(db).create(
            RecordMapper.to_model(MembershipPayment, values)
        )
        logger.info(
            f"payment_recorded id={payment.id} member={payment.member_id} "
            f"amount={payment.amount} method={payment.payment_method.value}"
        )
        return payment

    @staticmethod
    def get_payment(db: Session, payment_id: UUID) -> Optional[MembershipPayment]:
        return PaymentRepository(db).get_by_id(payment_id)

    @staticmethod
    def update_payment(
        db: Session, payment_id: UUID, payment_data: PaymentUpdate
    ) -> MembershipPayment:
        repo = PaymentRepository(db)
        payment = repo.get_by_id(payment_id)
        if not payment:
            raise NotFoundError(f"Payment {payment_id} not found")
        changes = RecordMapper.to_changes(payment_data)
        payment = repo.update(payment, changes, expected_version=payment_data.expected_version)
        logger.info(f"payment_updated id={payment.id} status={payment.status.value}")
        return payment

    @staticmethod
    def get_overdue(db: Session, as_of: Optional[date] = None) -> List[MembershipPayment]:
        return PaymentRepository(db).get_overdue(as_of)

    @staticmethod
    def delete_payment(db: Session, payment_id: UUID) -> bool:
        return PaymentRepository(db).delete(payment_id)


class CheckInService:
    """Business logic for member visits"""

    @staticmethod
    def check_in(db: Session, check_in_data: CheckInCreate) -> CheckIn:
        """
        Open a visit for a member.

        A member can only have one open visit at a time. The check below
        gives the friendly error; a concurrent duplicate that slips past it
        is stopped by the open-visit unique index and raises
        ConstraintViolation instead.
        """
        values = RecordMapper.to_changes(check_in_data)
        repo = CheckInRepository(db)
        member_id = values.get("member_id")
        if member_id is not None and repo.get_open_for_member(member_id):
            raise ServiceValidationError(
                f"Member {member_id} is already checked in",
                code="ALREADY_CHECKED_IN",
            )
        visit = repo.create(RecordMapper.to_model(CheckIn, values))
        logger.info(f"member_checked_in id={visit.id} member={visit.member_id}")
        return visit

    @staticmethod
    def check_out(
        db: Session, check_in_id: UUID, check_out_time: Optional[datetime] = None
    ) -> CheckIn:
        """Close an open visit; the check-out time defaults to now."""
        repo = CheckInRepository(db)
        visit = repo.get_by_id(check_in_id)
        if not visit:
            raise NotFoundError(f"Check-in {check_in_id} not found")
        if not visit.is_open:
            raise ServiceValidationError(
                f"Check-in {check_in_id} is already closed", code="ALREADY_CHECKED_OUT"
            )
        visit = repo.update(visit, {"check_out_time": check_out_time or now()})
        logger.info(
            f"member_checked_out id={visit.id} member={visit.member_id} "
            f"minutes={visit.duration_minutes}"
        )
        return visit

    @staticmethod
    def get_check_in(db: Session, check_in_id: UUID) -> Optional[CheckIn]:
        return CheckInRepository(db).get_by_id(check_in_id)

    @staticmethod
    def delete_check_in(db: Session, check_in_id: UUID) -> bool:
        return CheckInRepository(db).delete(check_in_id)


class WorkoutSessionService:
    """Business logic for workout sessions"""

    @staticmethod
    def create_session(db: Session, session_data: WorkoutSessionCreate) -> WorkoutSession:
        values = RecordMapper.to_changes(session_data)
        session = WorkoutSessionRepository(db).create(
            RecordMapper.to_model(WorkoutSession, values)
        )
        logger.info(
            f"workout_session_created id={session.id} member={session.member_id} "
            f"trainer={session.trainer_id} type={session.workout_type}"
        )
        return session

    @staticmethod
    def get_session(db: Session, session_id: UUID) -> Optional[WorkoutSession]:
        return WorkoutSessionRepository(db).get_by_id(session_id)

    @staticmethod
    def update_session(
        db: Session, session_id: UUID, session_data: WorkoutSessionUpdate
    ) -> WorkoutSession:
        repo = WorkoutSessionRepository(db)
        session = repo.get_by_id(session_id)
        if not session:
            raise NotFoundError(f"Workout session {session_id} not found")
        changes = RecordMapper.to_changes(session_data)
        session = repo.update(session, changes, expected_version=session_data.expected_version)
        logger.info(f"workout_session_updated id={session.id} fields={sorted(changes)}")
        return session

    @staticmethod
    def delete_session(db: Session, session_id: UUID) -> bool:
        return WorkoutSessionRepository(db).delete(session_id)


class FitnessClassService:
    """Business logic for group fitness classes"""

    @staticmethod
    def create_class(db: Session, class_data: FitnessClassCreate) -> FitnessClass:
        values = RecordMapper.to_changes(class_data)
        fitness_class = FitnessClassRepository(db).create(
            RecordMapper.to_model(FitnessClass, values)
        )
        logger.info(
            f"fitness_class_created id={fitness_class.id} trainer={fitness_class.trainer_id} "
            f"name={fitness_class.class_name} start={fitness_class.start_time.isoformat()}"
        )
        return fitness_class

    @staticmethod
    def get_class(db: Session, class_id: UUID) -> Optional[FitnessClass]:
        return FitnessClassRepository(db).get_by_id(class_id)

    @staticmethod
    def update_class(
        db: Session, class_id: UUID, class_data: FitnessClassUpdate
    ) -> FitnessClass:
        repo = FitnessClassRepository(db)
        fitness_class = repo.get_by_id(class_id)
        if not fitness_class:
            raise NotFoundError(f"Fitness class {class_id} not found")
        changes = RecordMapper.to_changes(class_data)
        fitness_class = repo.update(
            fitness_class, changes, expected_version=class_data.expected_version
        )
        logger.info(f"fitness_class_updated id={fitness_class.id} fields={sorted(changes)}")
        return fitness_class

    @staticmethod
    def delete_class(db: Session, class_id: UUID) -> bool:
        return FitnessClassRepository(db).delete(class_id)
