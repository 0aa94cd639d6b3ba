"""
Membership Plan Repository - Data access layer for membership plans
"""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from repositories.base import BaseRepository
from repositories.member_repository import MemberRepository
from domain.models import MembershipPlan, MembershipPayment
from domain.enums import PlanStatus
from domain.validation import MEMBERSHIP_PLAN_RULES
from app.exceptions import ConstraintViolation, Violation

logger = logging.getLogger("fitnesscenter.repository.plan")


class MembershipPlanRepository(BaseRepository[MembershipPlan]):
    """Repository for membership plan data access"""

    rules = MEMBERSHIP_PLAN_RULES

    def __init__(self, db: Session):
        super().__init__(db, MembershipPlan)

    def get_active(self) -> List[MembershipPlan]:
        """Plans that can currently be sold, cheapest first"""
        return (
            self.db.query(MembershipPlan)
            .filter(MembershipPlan.status == PlanStatus.ACTIVE)
            .order_by(MembershipPlan.price)
            .all()
        )

    def delete_plan(self, plan_id: UUID, cascade_members: bool = True) -> bool:
        """
        Delete a plan.

        Members on the plan and all their owned records are deleted in the
        same transaction. With ``cascade_members=False`` the delete is refused
        instead while members still reference the plan. Payments that
        mention the plan keep their row with the plan reference cleared.
        """
        plan = self.get_by_id(plan_id)
        if not plan:
            return False

        member_repo = MemberRepository(self.db)
        members = member_repo.get_by_plan_id(plan_id)
        if members and not cascade_members:
            raise ConstraintViolation(
                self.kind,
                [
                    Violation(
                        "members",
                        "restricted_delete",
                        f"Plan is still referenced by {len(members)} member(s)",
                    )
                ],
            )

        for member in members:
            member_repo.delete_owned(member)
            self.db.delete(member)
        if members:
            # members must be gone before the plan row they point at
            self.db.flush()
            logger.warning(
                f"plan_delete_cascaded plan_id={plan_id} members_deleted={len(members)}"
            )

        self.db.query(MembershipPayment).filter(
            MembershipPayment.membership_plan_id == plan_id
        ).update({MembershipPayment.membership_plan_id: None}, synchronize_session=False)

        self.db.delete(plan)
        self._commit()
        return True
