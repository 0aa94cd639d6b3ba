from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import (
    Member,
    MembershipPayment,
    CheckIn,
    WorkoutSession,
)
from domain.enums import MemberStatus
from domain.mappers import RecordMapper
from domain.schemas.member_schemas import MemberCreate, MemberUpdate
from repositories import (
    MemberRepository,
    PaymentRepository,
    CheckInRepository,
    WorkoutSessionRepository,
)
from services.references import get_member_or_404
from app.exceptions import ConstraintViolation, RecordValidationError

logger = logging.getLogger("fitnesscenter.member")


class MemberService:
    """Business logic for member management"""

    @staticmethod
    def create_member(db: Session, member_data: MemberCreate) -> Member:
        """
        Create a member.

        Status defaults to ACTIVE and join date to today when omitted. All
        field rule failures are reported together; duplicate member_id or
        email and an unknown membership plan raise ConstraintViolation.
        """
        values = RecordMapper.to_changes(member_data)
        member = RecordMapper.to_model(Member, values)
        try:
            member = MemberRepository(db).create(member)
        except (RecordValidationError, ConstraintViolation) as e:
            logger.warning(f"member_create_rejected member_id={values.get('member_id')} error={e}")
            raise

        logger.info(
            f"member_created id={member.id} member_id={member.member_id} "
            f"status={member.status.value} plan_id={member.membership_plan_id}"
        )
        return member

    @staticmethod
    def get_member(db: Session, member_id: UUID) -> Optional[Member]:
        """Retrieve a member by surrogate id"""
        member = MemberRepository(db).get_by_id(member_id)
        if not member:
            logger.warning(f"member_not_found id={member_id}")
        return member

    @staticmethod
    def get_by_member_id(db: Session, member_number: str) -> Optional[Member]:
        """Retrieve a member by their external member number"""
        return MemberRepository(db).get_by_member_id(member_number)

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[Member]:
        return MemberRepository(db).get_by_email(email)

    @staticmethod
    def list_members(
        db: Session,
        skip: int = 0,
        limit: int = 100,
        status: Optional[MemberStatus] = None,
    ) -> List[Member]:
        """Return members, oldest first, optionally filtered by status"""
        return MemberRepository(db).get_all(skip=skip, limit=limit, status=status)

    @staticmethod
    def update_member(db: Session, member_id: UUID, member_data: MemberUpdate) -> Member:
        """
        Apply a partial update.

        Only fields present in ``member_data`` change. The merged record must
        still pass every rule; ``updated_at`` is refreshed and ``created_at``
        is left alone.
        """
        member = get_member_or_404(db, member_id)
        changes = RecordMapper.to_changes(member_data)

        member = MemberRepository(db).update(
            member, changes, expected_version=member_data.expected_version
        )
        logger.info(
            f"member_updated id={member.id} fields={sorted(changes)} version={member.version}"
        )
        return member

    @staticmethod
    def delete_member(db: Session, member_id: UUID) -> bool:
        """Delete a member with their payments, check-ins and workout sessions."""
        if MemberRepository(db).delete(member_id):
            logger.info(f"member_deleted id={member_id}")
            return True
        return False

    @staticmethod
    def get_payments(db: Session, member_id: UUID) -> List[MembershipPayment]:
        get_member_or_404(db, member_id)
        return PaymentRepository(db).get_by_member_id(member_id)

    @staticmethod
    def get_check_ins(db: Session, member_id: UUID) -> List[CheckIn]:
        get_member_or_404(db, member_id)
        return CheckInRepository(db).get_by_member_id(member_id)

    @staticmethod
    def get_workout_sessions(db: Session, member_id: UUID) -> List[WorkoutSession]:
        get_member_or_404(db, member_id)
        return WorkoutSessionRepository(db).get_by_member_id(member_id)
