"""
Timestamp auditing.
Stamps the Timestamps value object of every entity that carries one, from a
session-wide before_flush hook, so business code never touches it.
"""

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from app.domain.models.common import Timestamps, as_naive_utc, utc_now


def _is_audited(obj) -> bool:
    return hasattr(type(obj), "timestamps")


def _stamp_new(obj, now) -> None:
    # A created_at supplied before first persistence (imports, fixtures) is kept
    created_at = as_naive_utc(obj.created_at) if obj.created_at else now
    updated_at = as_naive_utc(obj.updated_at) if obj.updated_at else created_at
    obj.timestamps = Timestamps(created_at=created_at, updated_at=updated_at)


def _stamp_modified(obj, now) -> None:
    history = inspect(obj).attrs.created_at.history
    if history.deleted and history.added and history.deleted[0] is not None:
        raise ValueError(f"{type(obj).__name__}.created_at cannot be changed once persisted")
    obj.timestamps = Timestamps(obj.created_at, obj.updated_at).touched(now)


@event.listens_for(Session, "before_flush")
def stamp_timestamps(session, flush_context, instances):
    now = utc_now()
    with session.no_autoflush:
        for obj in session.new:
            if _is_audited(obj):
                _stamp_new(obj, now)
        for obj in session.dirty:
            if _is_audited(obj) and session.is_modified(obj, include_collections=False):
                _stamp_modified(obj, now)
