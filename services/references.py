"""
Lookups that turn a missing parent record into NotFoundError.
"""

from uuid import UUID
from sqlalchemy.orm import Session

from domain.models import Member, Trainer, MembershipPlan
from app.exceptions import NotFoundError


def get_member_or_404(db: Session, member_id: UUID) -> Member:
    member = db.get(Member, member_id)
    if not member:
        raise NotFoundError(f"Member {member_id} not found")
    return member


def get_trainer_or_404(db: Session, trainer_id: UUID) -> Trainer:
    trainer = db.get(Trainer, trainer_id)
    if not trainer:
        raise NotFoundError(f"Trainer {trainer_id} not found")
    return trainer


def get_plan_or_404(db: Session, plan_id: UUID) -> MembershipPlan:
    plan = db.get(MembershipPlan, plan_id)
    if not plan:
        raise NotFoundError(f"Membership plan {plan_id} not found")
    return plan
