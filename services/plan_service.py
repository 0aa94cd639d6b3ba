from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import MembershipPlan, Member
from domain.enums import PlanStatus
from domain.mappers import RecordMapper
from domain.schemas.plan_schemas import MembershipPlanCreate, MembershipPlanUpdate
from repositories import MembershipPlanRepository, MemberRepository
from services.references import get_plan_or_404
from app.config import settings

logger = logging.getLogger("fitnesscenter.plan")


class MembershipPlanService:
    """Business logic for membership plans"""

    @staticmethod
    def create_plan(db: Session, plan_data: MembershipPlanCreate) -> MembershipPlan:
        """
        Create a plan.

        Unset entitlement flags default to gym access only (every other flag
        false) and status defaults to ACTIVE.
        """
        values = RecordMapper.to_changes(plan_data)
        plan = MembershipPlanRepository(db).create(
            RecordMapper.to_model(MembershipPlan, values)
        )
        logger.info(
            f"plan_created id={plan.id} name={plan.plan_name} "
            f"type={plan.plan_type.value if plan.plan_type else None} price={plan.price}"
        )
        return plan

    @staticmethod
    def get_plan(db: Session, plan_id: UUID) -> Optional[MembershipPlan]:
        return MembershipPlanRepository(db).get_by_id(plan_id)

    @staticmethod
    def list_plans(
        db: Session,
        skip: int = 0,
        limit: int = 100,
        status: Optional[PlanStatus] = None,
    ) -> List[MembershipPlan]:
        return MembershipPlanRepository(db).get_all(skip=skip, limit=limit, status=status)

    @staticmethod
    def get_active_plans(db: Session) -> List[MembershipPlan]:
        return MembershipPlanRepository(db).get_active()

    @staticmethod
    def update_plan(db: Session, plan_id: UUID, plan_data: MembershipPlanUpdate) -> MembershipPlan:
        plan = get_plan_or_404(db, plan_id)
        changes = RecordMapper.to_changes(plan_data)
        plan = MembershipPlanRepository(db).update(
            plan, changes, expected_version=plan_data.expected_version
        )
        logger.info(f"plan_updated id={plan.id} fields={sorted(changes)} version={plan.version}")
        return plan

    @staticmethod
    def get_members(db: Session, plan_id: UUID) -> List[Member]:
        get_plan_or_404(db, plan_id)
        return MemberRepository(db).get_by_plan_id(plan_id)

    @staticmethod
    def delete_plan(
        db: Session, plan_id: UUID, cascade_members: Optional[bool] = None
    ) -> bool:
        """
        Delete a plan.

        ``cascade_members`` falls back to ``settings.plan_delete_cascades_members``.
        When cascading (the default), every member on the plan is deleted too;
        otherwise a plan still in use raises ConstraintViolation.
        """
        if cascade_members is None:
            cascade_members = settings.plan_delete_cascades_members
        deleted = MembershipPlanRepository(db).delete_plan(
            plan_id, cascade_members=cascade_members
        )
        if deleted:
            logger.info(f"plan_deleted id={plan_id} cascade_members={cascade_members}")
        return deleted
