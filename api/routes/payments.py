"""Membership payment routes"""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from domain.models import get_db_session
from domain.schemas import PaymentCreate, PaymentUpdate, PaymentResponse
from domain.mappers import RecordMapper
from services import PaymentService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/payments", tags=["Payments"])
logger = logging.getLogger("fitnesscenter.api.payments")


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def record_payment(payment: PaymentCreate, db: Session = Depends(get_db_session)):
    new_payment = PaymentService.record_payment(db, payment)
    return RecordMapper.to_response(new_payment, PaymentResponse)


@router.get("/overdue", response_model=List[PaymentResponse])
def list_overdue_payments(
    as_of: Optional[date] = None, db: Session = Depends(get_db_session)
):
    """Pending payments whose due date has passed."""
    payments = PaymentService.get_overdue(db, as_of)
    return [RecordMapper.to_response(p, PaymentResponse) for p in payments]


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: UUID, db: Session = Depends(get_db_session)):
    payment = PaymentService.get_payment(db, payment_id)
    if not payment:
        raise NotFoundError(f"Payment {payment_id} not found")
    return RecordMapper.to_response(payment, PaymentResponse)


@router.patch("/{payment_id}", response_model=PaymentResponse)
def update_payment(
    payment_id: UUID, payment: PaymentUpdate, db: Session = Depends(get_db_session)
):
    updated = PaymentService.update_payment(db, payment_id, payment)
    return RecordMapper.to_response(updated, PaymentResponse)


@router.delete("/{payment_id}")
def delete_payment(payment_id: UUID, db: Session = Depends(get_db_session)):
    if not PaymentService.delete_payment(db, payment_id):
        raise NotFoundError(f"Payment {payment_id} not found")
    return {"status": "ok", "deleted": str(payment_id)}
