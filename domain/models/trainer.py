"""
Trainer record model.
"""

from sqlalchemy import (
    Column,
    String,
    Date,
    Integer,
    Numeric,
    Enum as SQLEnum,
)

from domain.models.database import Base
from domain.models.mixins import AuditMixin, PersonMixin
from domain.enums import TrainerStatus
from domain.lifecycle import creation_date


class Trainer(AuditMixin, PersonMixin, Base):
    """Trainer employed by the center. Owns workout sessions and fitness classes."""

    __tablename__ = "trainers"

    trainer_id = Column(String(50), unique=True, nullable=False)
    certification = Column(String(255), nullable=False)
    years_experience = Column(Integer, nullable=False)
    specialization = Column(String(255), nullable=False)
    bio = Column(String(1000))
    hourly_rate = Column(Numeric(8, 2), nullable=False)
    hire_date = Column(Date, nullable=False)
    status = Column(SQLEnum(TrainerStatus, name="trainer_status"), nullable=False)
    availability_schedule = Column(String(1000))
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __creation_defaults__ = {
        "status": TrainerStatus.ACTIVE,
        "hire_date": creation_date,
    }

    def __repr__(self) -> str:
        return f"<Trainer {self.trainer_id} {self.email}>"
