"""Trainer management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List, Optional

from domain.models import get_db_session
from domain.enums import TrainerStatus
from domain.schemas import (
    TrainerCreate,
    TrainerUpdate,
    TrainerResponse,
    WorkoutSessionResponse,
    FitnessClassResponse,
)
from domain.mappers import RecordMapper
from services import TrainerService
from api.dependencies import Pagination
from app.exceptions import NotFoundError

router = APIRouter(prefix="/trainers", tags=["Trainers"])
logger = logging.getLogger("fitnesscenter.api.trainers")


@router.post("", response_model=TrainerResponse, status_code=status.HTTP_201_CREATED)
def create_trainer(trainer: TrainerCreate, db: Session = Depends(get_db_session)):
    new_trainer = TrainerService.create_trainer(db, trainer)
    return RecordMapper.to_response(new_trainer, TrainerResponse)


@router.get("", response_model=List[TrainerResponse])
def list_trainers(
    trainer_status: Optional[TrainerStatus] = None,
    page: Pagination = Depends(),
    db: Session = Depends(get_db_session),
):
    trainers = TrainerService.list_trainers(
        db, skip=page.skip, limit=page.limit, status=trainer_status
    )
    return [RecordMapper.to_response(t, TrainerResponse) for t in trainers]


@router.get("/by-trainer-id/{trainer_number}", response_model=TrainerResponse)
def get_trainer_by_number(trainer_number: str, db: Session = Depends(get_db_session)):
    trainer = TrainerService.get_by_trainer_id(db, trainer_number)
    if not trainer:
        raise NotFoundError(f"Trainer {trainer_number} not found")
    return RecordMapper.to_response(trainer, TrainerResponse)


@router.get("/by-email/{email}", response_model=TrainerResponse)
def get_trainer_by_email(email: str, db: Session = Depends(get_db_session)):
    trainer = TrainerService.get_by_email(db, email)
    if not trainer:
        raise NotFoundError(f"Trainer with email {email} not found")
    return RecordMapper.to_response(trainer, TrainerResponse)


@router.get("/{trainer_id}", response_model=TrainerResponse)
def get_trainer(trainer_id: UUID, db: Session = Depends(get_db_session)):
    trainer = TrainerService.get_trainer(db, trainer_id)
    if not trainer:
        raise NotFoundError(f"Trainer {trainer_id} not found")
    return RecordMapper.to_response(trainer, TrainerResponse)


@router.patch("/{trainer_id}", response_model=TrainerResponse)
def update_trainer(
    trainer_id: UUID, trainer: TrainerUpdate, db: Session = Depends(get_db_session)
):
    updated = TrainerService.update_trainer(db, trainer_id, trainer)
    return RecordMapper.to_response(updated, TrainerResponse)


@router.delete("/{trainer_id}")
def delete_trainer(trainer_id: UUID, db: Session = Depends(get_db_session)):
    """Delete a trainer together with their workout sessions and classes."""
    success = TrainerService.delete_trainer(db, trainer_id)
    if not success:
        raise NotFoundError(f"Trainer {trainer_id} not found")
    return {"status": "ok", "deleted": str(trainer_id)}


@router.get("/{trainer_id}/workout-sessions", response_model=List[WorkoutSessionResponse])
def get_trainer_workout_sessions(trainer_id: UUID, db: Session = Depends(get_db_session)):
    sessions = TrainerService.get_workout_sessions(db, trainer_id)
    return [RecordMapper.to_response(s, WorkoutSessionResponse) for s in sessions]


@router.get("/{trainer_id}/classes", response_model=List[FitnessClassResponse])
def get_trainer_classes(trainer_id: UUID, db: Session = Depends(get_db_session)):
    classes = TrainerService.get_fitness_classes(db, trainer_id)
    return [RecordMapper.to_response(c, FitnessClassResponse) for c in classes]
