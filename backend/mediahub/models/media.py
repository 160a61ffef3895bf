"""Media ORM: a publishing outlet, unique by (title, username).

Invariants:
    - id is an integer identity
    - (title, username) is unique at the database level as well as in the service

Design Decisions:
    - No relationship() to Publication: deleting a referenced Media must reach
      the database and fail on the foreign key, not be rewritten by the ORM
"""

from sqlalchemy import Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from mediahub.db.base import Base


class Media(Base):
    """Media outlet (a social account, a blog, a channel)."""
    __tablename__ = "medias"
    __table_args__ = (
        UniqueConstraint("title", "username", name="uq_medias_title_username"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    username: Mapped[str] = mapped_column(Text, nullable=False)
