"""
Member Repository - Data access layer for member operations
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Member, MembershipPlan, MembershipPayment, CheckIn, WorkoutSession
from domain.mappers import normalize_email
from domain.validation import MEMBER_RULES


class MemberRepository(BaseRepository[Member]):
    """Repository for member data access"""

    rules = MEMBER_RULES
    unique_fields = ("member_id", "email")
    references = {"membership_plan_id": MembershipPlan}

    def __init__(self, db: Session):
        super().__init__(db, Member)

    def get_by_member_id(self, member_id: str) -> Optional[Member]:
        """Get member by the externally visible member number"""
        return self.db.query(Member).filter(Member.member_id == member_id).first()

    def get_by_email(self, email: str) -> Optional[Member]:
        """Get member by email (case-insensitive)"""
        return (
            self.db.query(Member)
            .filter(Member.email == normalize_email(email))
            .first()
        )

    def get_by_plan_id(self, plan_id: UUID) -> List[Member]:
        """Members currently on a membership plan"""
        return (
            self.db.query(Member)
            .filter(Member.membership_plan_id == plan_id)
            .order_by(Member.created_at)
            .all()
        )

    def delete_owned(self, member: Member) -> None:
        """Remove payments, check-ins and workout sessions owned by the member"""
        for owned in (MembershipPayment, CheckIn, WorkoutSession):
            self.db.query(owned).filter(owned.member_id == member.id).delete(
                synchronize_session=False
            )
