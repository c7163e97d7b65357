"""Pieces shared by every domain model: the Timestamps value object and field guards."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Current time as naive UTC, the form stored in every timestamp column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Timestamps:
    """Creation and last-modification instants, mapped as a composite over
    the created_at / updated_at columns of each entity.

    Values are stamped by the session auditing hook in
    app.infrastructure.auditing, never by business code.
    """

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __composite_values__(self):
        return self.created_at, self.updated_at

    def touched(self, now: datetime) -> "Timestamps":
        """Copy with updated_at advanced to now, or one microsecond past the previous value."""
        previous = self.updated_at
        if previous is not None:
            previous = as_naive_utc(previous)
            if now <= previous:
                now = previous + timedelta(microseconds=1)
        return Timestamps(created_at=self.created_at, updated_at=now)


def reject_reassignment(entity: Any, key: str, value: Any) -> Any:
    """Validator body for fields fixed at construction time."""
    current = getattr(entity, key)
    if current is not None and current != value:
        raise ValueError(f"{type(entity).__name__}.{key} cannot be changed once set")
    return value
