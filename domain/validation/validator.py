"""
Batch validator: evaluates a rule table against a set of field values and
reports every violation instead of stopping at the first one.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Sequence, Tuple
import logging

from app.exceptions import RecordValidationError, Violation
from domain.validation.rules import Required, Rule

logger = logging.getLogger("fitnesscenter.validation")

CrossFieldCheck = Callable[[Mapping[str, Any]], Iterable[Violation]]


@dataclass(frozen=True)
class RuleTable:
    """Field-to-rules mapping for one record kind, plus optional cross-field checks."""

    kind: str
    fields: Mapping[str, Sequence[Rule]]
    checks: Tuple[CrossFieldCheck, ...] = field(default_factory=tuple)

    def required_fields(self) -> List[str]:
        return [
            name
            for name, rules in self.fields.items()
            if any(isinstance(r, Required) for r in rules)
        ]


def validate_record(table: RuleTable, values: Mapping[str, Any]) -> List[Violation]:
    """
    Evaluate every rule of ``table`` against ``values``.

    A missing field with a Required rule yields one "required" violation and
    its remaining rules are skipped; a missing optional field is skipped
    entirely. Values of the wrong type are reported as a "type" violation on
    that field rather than raising.
    """
    violations: List[Violation] = []

    for name, rules in table.fields.items():
        value = values.get(name)

        if Required.is_missing(value):
            required = next((r for r in rules if isinstance(r, Required)), None)
            if required is not None:
                violations.append(Violation(name, required.name, required.check(name, value)))
            continue

        for rule in rules:
            if isinstance(rule, Required):
                continue
            try:
                message = rule.check(name, value)
            except (TypeError, ValueError, AttributeError):
                violations.append(Violation(name, "type", f"{name} has an invalid value type"))
                break
            if message:
                violations.append(Violation(name, rule.name, message))

    for check in table.checks:
        violations.extend(check(values))

    return violations


def validate_or_raise(table: RuleTable, values: Mapping[str, Any]) -> None:
    """Raise RecordValidationError listing every failing field, if any."""
    violations = validate_record(table, values)
    if violations:
        logger.info(
            f"validation_failed kind={table.kind} "
            f"fields={sorted({v.field for v in violations})}"
        )
        raise RecordValidationError(table.kind, violations)
