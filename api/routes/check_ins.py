"""Check-in and check-out routes"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from domain.models import get_db_session
from domain.schemas import CheckInCreate, CheckOutRequest, CheckInResponse
from domain.mappers import RecordMapper
from services import CheckInService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/check-ins", tags=["Check-ins"])
logger = logging.getLogger("fitnesscenter.api.check_ins")


@router.post("", response_model=CheckInResponse, status_code=status.HTTP_201_CREATED)
def check_in(body: CheckInCreate, db: Session = Depends(get_db_session)):
    """Open a visit. The check-in time defaults to now."""
    visit = CheckInService.check_in(db, body)
    return RecordMapper.to_response(visit, CheckInResponse)


@router.post("/{check_in_id}/check-out", response_model=CheckInResponse)
def check_out(
    check_in_id: UUID,
    body: Optional[CheckOutRequest] = None,
    db: Session = Depends(get_db_session),
):
    """Close an open visit."""
    check_out_time = body.check_out_time if body else None
    visit = CheckInService.check_out(db, check_in_id, check_out_time)
    return RecordMapper.to_response(visit, CheckInResponse)


@router.get("/{check_in_id}", response_model=CheckInResponse)
def get_check_in(check_in_id: UUID, db: Session = Depends(get_db_session)):
    visit = CheckInService.get_check_in(db, check_in_id)
    if not visit:
        raise NotFoundError(f"Check-in {check_in_id} not found")
    return RecordMapper.to_response(visit, CheckInResponse)


@router.delete("/{check_in_id}")
def delete_check_in(check_in_id: UUID, db: Session = Depends(get_db_session)):
    if not CheckInService.delete_check_in(db, check_in_id):
        raise NotFoundError(f"Check-in {check_in_id} not found")
    return {"status": "ok", "deleted": str(check_in_id)}
