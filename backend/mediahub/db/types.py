"""Column Types: timezone-normalizing datetime for every stored timestamp.

Invariants:
    - Values written are aware and in UTC
    - Values read are aware and in UTC, even on SQLite (which drops tzinfo)
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from mediahub.core.publication_state import as_utc


class UTCDateTime(TypeDecorator):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        return as_utc(value)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        return as_utc(value)
