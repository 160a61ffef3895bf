"""ORM Models: SQLAlchemy declarative models for the three entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Media and Post are independent; Publication references one of each

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate runs
"""

from mediahub.models.media import Media  # noqa: F401
from mediahub.models.post import Post  # noqa: F401
from mediahub.models.publication import Publication  # noqa: F401
