"""Publication State: pure derivation of Scheduled / Published from a date.

Invariants:
    - is_published(date, now) == (date <= now), evaluated against UTC
    - Naive datetimes are read as UTC (SQLite returns naive values)
    - The transition Scheduled -> Published is one-way and time-driven

Design Decisions:
    - `now` is always an argument: callers read their clock once per operation
"""

from datetime import datetime, timezone

from mediahub.core.domain_types import PublicationState


def as_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_published(date: datetime, now: datetime) -> bool:
    return as_utc(date) <= as_utc(now)


def publication_state(date: datetime, now: datetime) -> PublicationState:
    """Map a scheduled date to its lifecycle state at `now`."""
    if is_published(date, now):
        return PublicationState.PUBLISHED
    return PublicationState.SCHEDULED


def can_update(date: datetime, now: datetime) -> bool:
    """Updates are allowed only while the stored date is still Scheduled."""
    return publication_state(date, now) is PublicationState.SCHEDULED
