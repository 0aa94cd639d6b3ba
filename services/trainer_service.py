from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Trainer, WorkoutSession, FitnessClass
from domain.enums import TrainerStatus
from domain.mappers import RecordMapper
from domain.schemas.trainer_schemas import TrainerCreate, TrainerUpdate
from repositories import (
    TrainerRepository,
    WorkoutSessionRepository,
    FitnessClassRepository,
)
from services.references import get_trainer_or_404

logger = logging.getLogger("fitnesscenter.trainer")


class TrainerService:
    """Business logic for trainer management"""

    @staticmethod
    def create_trainer(db: Session, trainer_data: TrainerCreate) -> Trainer:
        """Create a trainer; status defaults to ACTIVE and hire date to today."""
        values = RecordMapper.to_changes(trainer_data)
        trainer = TrainerRepository(db).create(RecordMapper.to_model(Trainer, values))
        logger.info(
            f"trainer_created id={trainer.id} trainer_id={trainer.trainer_id} "
            f"specialization={trainer.specialization}"
        )
        return trainer

    @staticmethod
    def get_trainer(db: Session, trainer_id: UUID) -> Optional[Trainer]:
        trainer = TrainerRepository(db).get_by_id(trainer_id)
        if not trainer:
            logger.warning(f"trainer_not_found id={trainer_id}")
        return trainer

    @staticmethod
    def get_by_trainer_id(db: Session, trainer_number: str) -> Optional[Trainer]:
        return TrainerRepository(db).get_by_trainer_id(trainer_number)

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[Trainer]:
        return TrainerRepository(db).get_by_email(email)

    @staticmethod
    def list_trainers(
        db: Session,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TrainerStatus] = None,
    ) -> List[Trainer]:
        return TrainerRepository(db).get_all(skip=skip, limit=limit, status=status)

    @staticmethod
    def update_trainer(db: Session, trainer_id: UUID, trainer_data: TrainerUpdate) -> Trainer:
        """Apply a partial update and refresh updated_at"""
        trainer = get_trainer_or_404(db, trainer_id)
        changes = RecordMapper.to_changes(trainer_data)
        trainer = TrainerRepository(db).update(
            trainer, changes, expected_version=trainer_data.expected_version
        )
        logger.info(
            f"trainer_updated id={trainer.id} fields={sorted(changes)} version={trainer.version}"
        )
        return trainer

    @staticmethod
    def delete_trainer(db: Session, trainer_id: UUID) -> bool:
        """Delete a trainer with their workout sessions and fitness classes."""
        if TrainerRepository(db).delete(trainer_id):
            logger.info(f"trainer_deleted id={trainer_id}")
            return True
        return False

    @staticmethod
    def get_workout_sessions(db: Session, trainer_id: UUID) -> List[WorkoutSession]:
        get_trainer_or_404(db, trainer_id)
        return WorkoutSessionRepository(db).get_by_trainer_id(trainer_id)

    @staticmethod
    def get_fitness_classes(db: Session, trainer_id: UUID) -> List[FitnessClass]:
        get_trainer_or_404(db, trainer_id)
        return FitnessClassRepository(db).get_by_trainer_id(trainer_id)
