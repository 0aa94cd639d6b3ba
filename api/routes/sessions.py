"""Workout session and fitness class routes"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from domain.models import get_db_session
from domain.schemas import (
    WorkoutSessionCreate,
    WorkoutSessionUpdate,
    WorkoutSessionResponse,
    FitnessClassCreate,
    FitnessClassUpdate,
    FitnessClassResponse,
)
from domain.mappers import RecordMapper
from services import WorkoutSessionService, FitnessClassService
from app.exceptions import NotFoundError

router = APIRouter(tags=["Sessions & Classes"])
logger = logging.getLogger("fitnesscenter.api.sessions")


# ============================================================================
# Workout sessions
# ============================================================================


@router.post(
    "/workout-sessions",
    response_model=WorkoutSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_workout_session(
    body: WorkoutSessionCreate, db: Session = Depends(get_db_session)
):
    session = WorkoutSessionService.create_session(db, body)
    return RecordMapper.to_response(session, WorkoutSessionResponse)


@router.get("/workout-sessions/{session_id}", response_model=WorkoutSessionResponse)
def get_workout_session(session_id: UUID, db: Session = Depends(get_db_session)):
    session = WorkoutSessionService.get_session(db, session_id)
    if not session:
        raise NotFoundError(f"Workout session {session_id} not found")
    return RecordMapper.to_response(session, WorkoutSessionResponse)


@router.patch("/workout-sessions/{session_id}", response_model=WorkoutSessionResponse)
def update_workout_session(
    session_id: UUID, body: WorkoutSessionUpdate, db: Session = Depends(get_db_session)
):
    session = WorkoutSessionService.update_session(db, session_id, body)
    return RecordMapper.to_response(session, WorkoutSessionResponse)


@router.delete("/workout-sessions/{session_id}")
def delete_workout_session(session_id: UUID, db: Session = Depends(get_db_session)):
    if not WorkoutSessionService.delete_session(db, session_id):
        raise NotFoundError(f"Workout session {session_id} not found")
    return {"status": "ok", "deleted": str(session_id)}


# ============================================================================
# Fitness classes
# ============================================================================


@router.post(
    "/classes", response_model=FitnessClassResponse, status_code=status.HTTP_201_CREATED
)
def create_fitness_class(body: FitnessClassCreate, db: Session = Depends(get_db_session)):
    fitness_class = FitnessClassService.create_class(db, body)
    return RecordMapper.to_response(fitness_class, FitnessClassResponse)


@router.get("/classes/{class_id}", response_model=FitnessClassResponse)
def get_fitness_class(class_id: UUID, db: Session = Depends(get_db_session)):
    fitness_class = FitnessClassService.get_class(db, class_id)
    if not fitness_class:
        raise NotFoundError(f"Fitness class {class_id} not found")
    return RecordMapper.to_response(fitness_class, FitnessClassResponse)


@router.patch("/classes/{class_id}", response_model=FitnessClassResponse)
def update_fitness_class(
    class_id: UUID, body: FitnessClassUpdate, db: Session = Depends(get_db_session)
):
    fitness_class = FitnessClassService.update_class(db, class_id, body)
    return RecordMapper.to_response(fitness_class, FitnessClassResponse)


@router.delete("/classes/{class_id}")
def delete_fitness_class(class_id: UUID, db: Session = Depends(get_db_session)):
    if not FitnessClassService.delete_class(db, class_id):
        raise NotFoundError(f"Fitness class {class_id} not found")
    return {"status": "ok", "deleted": str(class_id)}
