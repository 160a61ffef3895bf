"""Initial schema: medias, posts, publications.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "medias",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("username", sa.Text, nullable=False),
        sa.UniqueConstraint("title", "username", name="uq_medias_title_username"),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("image", sa.Text, nullable=True),
    )

    op.create_table(
        "publications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "media_id", sa.Integer,
            sa.ForeignKey("medias.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column(
            "post_id", sa.Integer,
            sa.ForeignKey("posts.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_publications_media_id", "publications", ["media_id"])
    op.create_index("ix_publications_post_id", "publications", ["post_id"])
    op.create_index("ix_publications_date", "publications", ["date"])


def downgrade() -> None:
    op.drop_index("ix_publications_date", table_name="publications")
    op.drop_index("ix_publications_post_id", table_name="publications")
    op.drop_index("ix_publications_media_id", table_name="publications")
    op.drop_table("publications")
    op.drop_table("posts")
    op.drop_table("medias")
