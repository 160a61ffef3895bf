"""Post ORM: a piece of content that can be scheduled on many media."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from mediahub.db.base import Base


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
