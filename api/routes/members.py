"""Member management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List, Optional

from domain.models import get_db_session
from domain.enums import MemberStatus
from domain.schemas import (
    MemberCreate,
    MemberUpdate,
    MemberResponse,
    PaymentResponse,
    CheckInResponse,
    WorkoutSessionResponse,
)
from domain.mappers import RecordMapper
from services import MemberService
from api.dependencies import Pagination
from app.exceptions import NotFoundError

router = APIRouter(prefix="/members", tags=["Members"])
logger = logging.getLogger("fitnesscenter.api.members")


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(member: MemberCreate, db: Session = Depends(get_db_session)):
    """Create a member. Status and join date are defaulted when omitted."""
    new_member = MemberService.create_member(db, member)
    return RecordMapper.to_response(new_member, MemberResponse)


@router.get("", response_model=List[MemberResponse])
def list_members(
    member_status: Optional[MemberStatus] = None,
    page: Pagination = Depends(),
    db: Session = Depends(get_db_session),
):
    members = MemberService.list_members(
        db, skip=page.skip, limit=page.limit, status=member_status
    )
    return [RecordMapper.to_response(m, MemberResponse) for m in members]


@router.get("/by-member-id/{member_number}", response_model=MemberResponse)
def get_member_by_number(member_number: str, db: Session = Depends(get_db_session)):
    """Look up a member by their membership number."""
    member = MemberService.get_by_member_id(db, member_number)
    if not member:
        raise NotFoundError(f"Member {member_number} not found")
    return RecordMapper.to_response(member, MemberResponse)


@router.get("/by-email/{email}", response_model=MemberResponse)
def get_member_by_email(email: str, db: Session = Depends(get_db_session)):
    member = MemberService.get_by_email(db, email)
    if not member:
        raise NotFoundError(f"Member with email {email} not found")
    return RecordMapper.to_response(member, MemberResponse)


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(member_id: UUID, db: Session = Depends(get_db_session)):
    """Get a member including full name, age and BMI."""
    member = MemberService.get_member(db, member_id)
    if not member:
        raise NotFoundError(f"Member {member_id} not found")
    return RecordMapper.to_response(member, MemberResponse)


@router.patch("/{member_id}", response_model=MemberResponse)
def update_member(
    member_id: UUID, member: MemberUpdate, db: Session = Depends(get_db_session)
):
    """Partially update a member. Send expected_version to guard against lost updates."""
    updated = MemberService.update_member(db, member_id, member)
    return RecordMapper.to_response(updated, MemberResponse)


@router.delete("/{member_id}")
def delete_member(member_id: UUID, db: Session = Depends(get_db_session)):
    """Delete a member and their payments, check-ins and workout sessions."""
    success = MemberService.delete_member(db, member_id)
    if not success:
        raise NotFoundError(f"Member {member_id} not found")
    return {"status": "ok", "deleted": str(member_id)}


@router.get("/{member_id}/payments", response_model=List[PaymentResponse])
def get_member_payments(member_id: UUID, db: Session = Depends(get_db_session)):
    payments = MemberService.get_payments(db, member_id)
    return [RecordMapper.to_response(p, PaymentResponse) for p in payments]


@router.get("/{member_id}/check-ins", response_model=List[CheckInResponse])
def get_member_check_ins(member_id: UUID, db: Session = Depends(get_db_session)):
    visits = MemberService.get_check_ins(db, member_id)
    return [RecordMapper.to_response(v, CheckInResponse) for v in visits]


@router.get("/{member_id}/workout-sessions", response_model=List[WorkoutSessionResponse])
def get_member_workout_sessions(member_id: UUID, db: Session = Depends(get_db_session)):
    sessions = MemberService.get_workout_sessions(db, member_id)
    return [RecordMapper.to_response(s, WorkoutSessionResponse) for s in sessions]
