"""
Trainer Repository - Data access layer for trainer operations
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Trainer, WorkoutSession, FitnessClass
from domain.mappers import normalize_email
from domain.validation import TRAINER_RULES


class TrainerRepository(BaseRepository[Trainer]):
    """Repository for trainer data access"""

    rules = TRAINER_RULES
    unique_fields = ("trainer_id", "email")

    def __init__(self, db: Session):
        super().__init__(db, Trainer)

    def get_by_trainer_id(self, trainer_id: str) -> Optional[Trainer]:
        return self.db.query(Trainer).filter(Trainer.trainer_id == trainer_id).first()

    def get_by_email(self, email: str) -> Optional[Trainer]:
        """Get trainer by email (case-insensitive)"""
        return (
            self.db.query(Trainer)
            .filter(Trainer.email == normalize_email(email))
            .first()
        )

    def delete_owned(self, trainer: Trainer) -> None:
        """Remove workout sessions and fitness classes owned by the trainer"""
        for owned in (WorkoutSession, FitnessClass):
            self.db.query(owned).filter(owned.trainer_id == trainer.id).delete(
                synchronize_session=False
            )
