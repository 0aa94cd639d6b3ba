"""
Record domain mappers.
Handles transformation between request DTOs, attribute dicts and ORM models.
"""

from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

ModelType = TypeVar("ModelType")

# Request-only keys that never map onto a model column
_CONTROL_KEYS = {"expected_version"}


def normalize_email(email: Any) -> Any:
    """Emails are compared case-insensitively, so they are stored trimmed and lower-cased."""
    if isinstance(email, str):
        return email.strip().lower()
    return email


class RecordMapper:
    """Mapper for record kinds that share the create/update/response shape."""

    @staticmethod
    def to_changes(payload: BaseModel) -> Dict[str, Any]:
        """
        Attribute dict containing only the fields the caller actually sent.

        Used for both creates and partial updates; unsent fields are absent,
        not None, so defaults and stored values are preserved.
        """
        changes = payload.model_dump(exclude_unset=True)
        for key in _CONTROL_KEYS:
            changes.pop(key, None)
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
        return changes

    @staticmethod
    def to_model(model: Type[ModelType], values: Dict[str, Any]) -> ModelType:
        """Build a transient model instance, ignoring keys that are not columns."""
        columns = column_names(model)
        return model(**{k: v for k, v in values.items() if k in columns})

    @staticmethod
    def to_values(record: Any) -> Dict[str, Any]:
        """Current column values of a record"""
        return {name: getattr(record, name) for name in column_names(type(record))}

    @staticmethod
    def to_response(record: Any, schema: Type[BaseModel]) -> BaseModel:
        """Response DTO, including derived properties such as full_name, age and bmi."""
        return schema.model_validate(record)


def column_names(model: Type[Any]) -> set:
    return {attr.key for attr in inspect(model).column_attrs}
