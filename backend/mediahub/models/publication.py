"""Publication ORM: schedules one Post on one Media at a given date.

Invariants:
    - media_id / post_id are non-null foreign keys with ON DELETE RESTRICT
    - date is stored in UTC (UTCDateTime)
    - There is no "published" column; the state is derived from date at read time

Design Decisions:
    - RESTRICT instead of CASCADE: a referenced Media/Post must not disappear
      under a publication; the service turns the violation into a 403
"""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from mediahub.db.base import Base
from mediahub.db.types import UTCDateTime


class Publication(Base):
    """Join entity between Media and Post, carrying the scheduled date."""
    __tablename__ = "publications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    media_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("medias.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, index=True)
