"""
Validation package - rule primitives, per-kind rule tables and the batch validator.
"""

from domain.validation.validator import RuleTable, validate_record, validate_or_raise
from domain.validation.tables import (
    MEMBER_RULES,
    TRAINER_RULES,
    MEMBERSHIP_PLAN_RULES,
    PAYMENT_RULES,
    CHECK_IN_RULES,
    WORKOUT_SESSION_RULES,
    FITNESS_CLASS_RULES,
)

__all__ = [
    "RuleTable",
    "validate_record",
    "validate_or_raise",
    "MEMBER_RULES",
    "TRAINER_RULES",
    "MEMBERSHIP_PLAN_RULES",
    "PAYMENT_RULES",
    "CHECK_IN_RULES",
    "WORKOUT_SESSION_RULES",
    "FITNESS_CLASS_RULES",
]
