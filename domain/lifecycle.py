"""
Explicit record lifecycle steps.

Repositories call apply_creation_defaults() on the first write of a record
and touch() on every later mutation. Per-kind defaults are declared on the
model class in ``__creation_defaults__`` as a mapping of attribute name to
either a constant or a callable taking the creation timestamp.
"""

from datetime import datetime, timedelta
from typing import Any, Optional
import logging

logger = logging.getLogger("fitnesscenter.lifecycle")

_MIN_TICK = timedelta(microseconds=1)


def now() -> datetime:
    """Current local timestamp used for audit fields."""
    return datetime.now()


def creation_date(ts: datetime):
    """Default factory: the calendar date of the creation timestamp."""
    return ts.date()


def creation_time(ts: datetime) -> datetime:
    """Default factory: the creation timestamp itself."""
    return ts


def apply_creation_defaults(record: Any, ts: Optional[datetime] = None) -> bool:
    """
    Populate audit timestamps and unset defaulted fields on a new record.

    Runs once per record: if ``created_at`` is already set the record is
    left untouched and False is returned.
    """
    if getattr(record, "created_at", None) is not None:
        return False

    ts = ts or now()
    record.created_at = ts
    record.updated_at = ts

    defaults = getattr(type(record), "__creation_defaults__", {})
    for attr, default in defaults.items():
        if getattr(record, attr, None) is None:
            value = default(ts) if callable(default) else default
            setattr(record, attr, value)

    logger.debug(
        f"creation_defaults_applied kind={type(record).__name__} "
        f"fields={sorted(defaults)}"
    )
    return True


def touch(record: Any, ts: Optional[datetime] = None) -> datetime:
    """
    Refresh ``updated_at`` after a mutation.

    The new value is always strictly later than the previous one, even when
    two updates land within the clock's resolution. ``created_at`` is not
    modified.
    """
    ts = ts or now()
    previous = getattr(record, "updated_at", None)
    if previous is not None and ts <= previous:
        ts = previous + _MIN_TICK
    record.updated_at = ts
    return ts
