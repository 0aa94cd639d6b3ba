"""
Rule primitives for field validation.

Each rule inspects one field value and returns an error message, or None
when the value passes. Rules never see missing values: presence is handled
by ``Required`` in the validator before any other rule runs.
"""

from __future__ import annotations
import enum
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Type

from email_validator import EmailNotValidError, validate_email


def humanize(field: str) -> str:
    """first_name -> First name"""
    return field.replace("_", " ").capitalize()


class Rule:
    """Base class for a single-field rule."""

    name = "rule"

    def check(self, field: str, value: Any) -> Optional[str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Required(Rule):
    """Value must be present; strings must also contain a non-space character."""

    name = "required"

    @staticmethod
    def is_missing(value: Any) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and not value.strip()

    def check(self, field, value):
        if self.is_missing(value):
            return f"{humanize(field)} is required"
        return None


class Length(Rule):
    name = "length"

    def __init__(self, min: Optional[int] = None, max: Optional[int] = None):
        self.min = min
        self.max = max

    def check(self, field, value):
        n = len(value)
        if self.min is not None and self.max is not None:
            if not self.min <= n <= self.max:
                return f"{humanize(field)} must be between {self.min} and {self.max} characters"
        elif self.min is not None and n < self.min:
            return f"{humanize(field)} must be at least {self.min} characters"
        elif self.max is not None and n > self.max:
            return f"{humanize(field)} must be at most {self.max} characters"
        return None


class Pattern(Rule):
    name = "pattern"

    def __init__(self, regex: str, message: Optional[str] = None):
        self.regex = re.compile(regex)
        self.message = message

    def check(self, field, value):
        if not self.regex.fullmatch(str(value)):
            return self.message or f"{humanize(field)} has an invalid format"
        return None


class Email(Rule):
    """Email syntax check (no DNS lookups)."""

    name = "email"

    def check(self, field, value):
        try:
            validate_email(str(value), check_deliverability=False)
        except EmailNotValidError:
            return f"{humanize(field)} should be valid"
        return None


class MinValue(Rule):
    name = "min"

    def __init__(self, limit, inclusive: bool = True):
        self.limit = limit
        self.inclusive = inclusive

    def check(self, field, value):
        ok = value >= self.limit if self.inclusive else value > self.limit
        if ok:
            return None
        if self.inclusive:
            return f"{humanize(field)} must be at least {self.limit}"
        return f"{humanize(field)} must be greater than {self.limit}"


class MaxValue(Rule):
    name = "max"

    def __init__(self, limit, inclusive: bool = True):
        self.limit = limit
        self.inclusive = inclusive

    def check(self, field, value):
        ok = value <= self.limit if self.inclusive else value < self.limit
        if ok:
            return None
        return f"{humanize(field)} must be at most {self.limit}"


class DecimalPlaces(Rule):
    """At most ``places`` digits after the decimal point."""

    name = "decimal_places"

    def __init__(self, places: int = 2):
        self.places = places

    def check(self, field, value):
        try:
            exponent = Decimal(str(value)).normalize().as_tuple().exponent
        except InvalidOperation:
            return f"{humanize(field)} must be a number"
        if isinstance(exponent, int) and exponent < -self.places:
            return f"{humanize(field)} must have at most {self.places} decimal places"
        return None


class PastDate(Rule):
    """Date must be strictly before today at validation time."""

    name = "past"

    def check(self, field, value):
        day = value.date() if isinstance(value, datetime) else value
        if day >= date.today():
            return f"{humanize(field)} must be in the past"
        return None


class OneOf(Rule):
    """Value must be a member (or the name of a member) of an enum."""

    name = "one_of"

    def __init__(self, enum_cls: Type[enum.Enum]):
        self.enum_cls = enum_cls

    def check(self, field, value):
        if isinstance(value, self.enum_cls):
            return None
        if isinstance(value, str) and value in self.enum_cls.__members__:
            return None
        allowed = ", ".join(self.enum_cls.__members__)
        return f"{humanize(field)} must be one of: {allowed}"


PHONE_PATTERN = r"^[+]?[0-9]{10,15}$"
