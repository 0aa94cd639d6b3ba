from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional


@dataclass(frozen=True)
class Violation:
    """A single failed rule on a single field."""

    field: str
    rule: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "rule": self.rule, "message": self.message}


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class RecordValidationError(ServiceValidationError):
    """Raised when one or more fields of a record fail their declared rules.

    Every failing field is reported, not just the first one. The caller can
    always recover by correcting the input and retrying.
    """

    http_status = 422

    def __init__(self, record_kind: str, violations: Iterable[Violation]):
        self.record_kind = record_kind
        self.violations: List[Violation] = list(violations)
        failing = ", ".join(sorted(self.fields))
        super().__init__(
            f"{record_kind} failed validation: {failing}",
            details={"violations": [v.to_dict() for v in self.violations]},
            code="VALIDATION_ERROR",
        )

    @property
    def fields(self) -> set:
        return {v.field for v in self.violations}


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ConflictError(Exception):
    """Raised when a resource conflict occurs (e.g., duplicate entry).

    Attributes are similar to ServiceValidationError. http_status is 409.
    """

    http_status = 409

    def __init__(self, message: str = "Conflict", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ConstraintViolation(ConflictError):
    """Raised when a storage-level constraint would be broken.

    Covers duplicate unique keys, references to missing records, stale
    optimistic-lock versions and deletes refused by the cascade policy.
    """

    def __init__(self, record_kind: str, violations: Iterable[Violation]):
        self.record_kind = record_kind
        self.violations: List[Violation] = list(violations)
        summary = "; ".join(v.message for v in self.violations)
        super().__init__(
            f"{record_kind} constraint violated: {summary}",
            details={"violations": [v.to_dict() for v in self.violations]},
            code="CONSTRAINT_VIOLATION",
        )

    @property
    def fields(self) -> set:
        return {v.field for v in self.violations}

    @classmethod
    def duplicate(cls, record_kind: str, field: str, value: Any) -> "ConstraintViolation":
        return cls(
            record_kind,
            [Violation(field, "unique", f"{field} '{value}' is already in use")],
        )

    @classmethod
    def missing_reference(cls, record_kind: str, field: str, value: Any) -> "ConstraintViolation":
        return cls(
            record_kind,
            [Violation(field, "reference", f"{field} '{value}' does not reference an existing record")],
        )
