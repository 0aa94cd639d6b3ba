"""Membership plan routes"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from domain.models import get_db_session
from domain.enums import PlanStatus
from domain.schemas import (
    MembershipPlanCreate,
    MembershipPlanUpdate,
    MembershipPlanResponse,
    MemberResponse,
)
from domain.mappers import RecordMapper
from services import MembershipPlanService
from api.dependencies import Pagination
from app.exceptions import NotFoundError

router = APIRouter(prefix="/membership-plans", tags=["Membership Plans"])
logger = logging.getLogger("fitnesscenter.api.plans")


@router.post("", response_model=MembershipPlanResponse, status_code=status.HTTP_201_CREATED)
def create_plan(plan: MembershipPlanCreate, db: Session = Depends(get_db_session)):
    """
    Create a membership plan.

    Entitlement flags that are not sent default to gym access only.
    """
    new_plan = MembershipPlanService.create_plan(db, plan)
    return RecordMapper.to_response(new_plan, MembershipPlanResponse)


@router.get("", response_model=List[MembershipPlanResponse])
def list_plans(
    plan_status: Optional[PlanStatus] = None,
    page: Pagination = Depends(),
    db: Session = Depends(get_db_session),
):
    plans = MembershipPlanService.list_plans(
        db, skip=page.skip, limit=page.limit, status=plan_status
    )
    return [RecordMapper.to_response(p, MembershipPlanResponse) for p in plans]


@router.get("/active", response_model=List[MembershipPlanResponse])
def list_active_plans(db: Session = Depends(get_db_session)):
    plans = MembershipPlanService.get_active_plans(db)
    return [RecordMapper.to_response(p, MembershipPlanResponse) for p in plans]


@router.get("/{plan_id}", response_model=MembershipPlanResponse)
def get_plan(plan_id: UUID, db: Session = Depends(get_db_session)):
    plan = MembershipPlanService.get_plan(db, plan_id)
    if not plan:
        raise NotFoundError(f"Membership plan {plan_id} not found")
    return RecordMapper.to_response(plan, MembershipPlanResponse)


@router.patch("/{plan_id}", response_model=MembershipPlanResponse)
def update_plan(
    plan_id: UUID, plan: MembershipPlanUpdate, db: Session = Depends(get_db_session)
):
    updated = MembershipPlanService.update_plan(db, plan_id, plan)
    return RecordMapper.to_response(updated, MembershipPlanResponse)


@router.get("/{plan_id}/members", response_model=List[MemberResponse])
def get_plan_members(plan_id: UUID, db: Session = Depends(get_db_session)):
    members = MembershipPlanService.get_members(db, plan_id)
    return [RecordMapper.to_response(m, MemberResponse) for m in members]


@router.delete("/{plan_id}")
def delete_plan(
    plan_id: UUID,
    cascade_members: Optional[bool] = Query(
        None, description="Also delete members on this plan (defaults to server setting)"
    ),
    db: Session = Depends(get_db_session),
):
    """
    Delete a plan.

    Members on the plan are deleted with it. Pass ``cascade_members=false``
    to refuse with 409 while the plan is still in use.
    """
    success = MembershipPlanService.delete_plan(db, plan_id, cascade_members=cascade_members)
    if not success:
        raise NotFoundError(f"Membership plan {plan_id} not found")
    return {"status": "ok", "deleted": str(plan_id)}
