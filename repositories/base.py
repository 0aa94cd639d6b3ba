"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

The storage-write path is where record lifecycle happens: create() applies
creation defaults and validates before the first write, update() validates
the merged record and refreshes ``updated_at``. Unique keys are checked up
front for a readable report and enforced again by the database constraint.
"""

from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar
from uuid import UUID
from abc import ABC
import logging

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.exceptions import ConstraintViolation, RecordValidationError, Violation
from domain.lifecycle import apply_creation_defaults, touch
from domain.mappers import RecordMapper, normalize_email
from domain.validation import RuleTable, validate_or_raise

ModelType = TypeVar("ModelType")

logger = logging.getLogger("fitnesscenter.repository")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    rules: Optional[RuleTable] = None
    unique_fields: Tuple[str, ...] = ()
    # column name -> model class the column must point at when set
    references: Dict[str, Type[Any]] = {}

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @property
    def kind(self) -> str:
        return self.model.__name__

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """Get entity by surrogate id"""
        return self.db.get(self.model, entity_id)

    def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """Get the first entity whose ``field`` equals ``value``"""
        return (
            self.db.query(self.model)
            .filter(getattr(self.model, field) == value)
            .first()
        )

    def get_all(self, skip: int = 0, limit: int = 100, **filters) -> List[ModelType]:
        """Get all entities with pagination, optionally filtered by column equality"""
        query = self.db.query(self.model)
        for field, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, field) == value)
        return query.order_by(self.model.created_at).offset(skip).limit(limit).all()

    def count(self, **filters) -> int:
        query = self.db.query(self.model)
        for field, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, field) == value)
        return query.count()

    def exists(self, entity_id: UUID) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, entity: ModelType) -> ModelType:
        """
        Persist a new entity.

        Creation defaults are applied first, then the full record is
        validated, then unique keys and references are checked.
        """
        apply_creation_defaults(entity)
        values = RecordMapper.to_values(entity)
        if self.rules is not None:
            validate_or_raise(self.rules, values)
        self._check_unique(values)
        self._check_references(values)

        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def update(
        self,
        entity: ModelType,
        changes: Dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> ModelType:
        """
        Apply a partial set of changes to an existing entity.

        The merged record is validated before anything is written. Audit
        fields and the surrogate id cannot be changed through ``changes``.
        """
        if expected_version is not None and entity.version != expected_version:
            raise self._stale(entity.version)

        changes = {
            k: v
            for k, v in changes.items()
            if k not in ("id", "created_at", "updated_at", "version")
        }
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
        merged = {**RecordMapper.to_values(entity), **changes}
        if self.rules is not None:
            validate_or_raise(self.rules, merged)
        self._check_unique(merged, exclude_id=entity.id)
        self._check_references(changes)

        for key, value in changes.items():
            setattr(entity, key, value)
        touch(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: UUID) -> bool:
        """Delete entity (and everything it owns) by ID"""
        entity = self.get_by_id(entity_id)
        if not entity:
            return False
        self.delete_owned(entity)
        self.db.delete(entity)
        self._commit()
        return True

    def delete_owned(self, entity: ModelType) -> None:
        """Remove records owned by ``entity``. Override in kinds that own collections."""
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_unique(self, values: Dict[str, Any], exclude_id: Optional[UUID] = None):
        for field in self.unique_fields:
            value = values.get(field)
            if value is None:
                continue
            query = self.db.query(self.model.id).filter(
                getattr(self.model, field) == value
            )
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            if query.first() is not None:
                logger.info(f"unique_conflict kind={self.kind} field={field}")
                raise ConstraintViolation.duplicate(self.kind, field, value)

    def _check_references(self, values: Dict[str, Any]):
        for field, target in self.references.items():
            value = values.get(field)
            if value is not None and self.db.get(target, value) is None:
                raise ConstraintViolation.missing_reference(self.kind, field, value)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"integrity_error kind={self.kind} error={e.orig}")
            raise self._integrity_violation(e) from e
        except DataError as e:
            self.db.rollback()
            logger.warning(f"data_error kind={self.kind} error={e.orig}")
            raise RecordValidationError(
                self.kind,
                [Violation("record", "type", "A value does not fit its column")],
            ) from e
        except StaleDataError as e:
            self.db.rollback()
            logger.warning(f"stale_write kind={self.kind} error={e}")
            raise self._stale() from e

    def _integrity_violation(self, error: IntegrityError) -> ConstraintViolation:
        message = str(error.orig).lower()
        fields: Iterable[str] = [f for f in self.unique_fields if f in message]
        if "unique" in message and fields:
            return ConstraintViolation(
                self.kind,
                [Violation(f, "unique", f"{f} is already in use") for f in fields],
            )
        if "foreign key" in message:
            return ConstraintViolation(
                self.kind,
                [Violation("record", "reference", "A referenced record does not exist or is still in use")],
            )
        return ConstraintViolation(
            self.kind, [Violation("record", "integrity", str(error.orig))]
        )

    def _stale(self, current: Optional[int] = None) -> ConstraintViolation:
        return ConstraintViolation(
            self.kind,
            [
                Violation(
                    "version",
                    "stale_version",
                    f"{self.kind} was modified concurrently (current version {current})",
                )
            ],
        )
