"""Boundary Protocols: contracts between the services and persistence.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy directly
    - find_unique / find_first return None for "absent"; they never raise not-found
    - create / update / delete raise ForeignKeyViolationError or
      UniqueViolationError (core/errors.py) when the store rejects the write

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
    - Records are returned as-is (ORM objects in production); services only
      read attributes declared on the *Record protocols
"""

from datetime import datetime
from typing import Any, Protocol

from mediahub.core.domain_types import MediaId, PostId, PublicationId


class MediaRecord(Protocol):
    id: int
    title: str
    username: str


class PostRecord(Protocol):
    id: int
    title: str
    text: str
    image: str | None


class PublicationRecord(Protocol):
    id: int
    media_id: int
    post_id: int
    date: datetime


class MediaRepository(Protocol):
    """Contract for Media persistence."""
    async def create(self, fields: dict[str, Any]) -> MediaRecord: ...
    async def find_many(self) -> list[MediaRecord]: ...
    async def find_unique(self, media_id: MediaId) -> MediaRecord | None: ...
    async def find_first(self, **match: Any) -> MediaRecord | None: ...
    async def update(self, media_id: MediaId, fields: dict[str, Any]) -> MediaRecord: ...
    async def delete(self, media_id: MediaId) -> MediaRecord: ...


class PostRepository(Protocol):
    """Contract for Post persistence."""
    async def create(self, fields: dict[str, Any]) -> PostRecord: ...
    async def find_many(self) -> list[PostRecord]: ...
    async def find_unique(self, post_id: PostId) -> PostRecord | None: ...
    async def update(self, post_id: PostId, fields: dict[str, Any]) -> PostRecord: ...
    async def delete(self, post_id: PostId) -> PostRecord: ...


class PublicationRepository(Protocol):
    """Contract for Publication persistence.

    find_many filters are combined with AND; None means "no bound".
    """
    async def create(self, fields: dict[str, Any]) -> PublicationRecord: ...
    async def find_many(
        self, *, date_lte: datetime | None = None, date_gt: datetime | None = None,
    ) -> list[PublicationRecord]: ...
    async def find_unique(
        self, publication_id: PublicationId,
    ) -> PublicationRecord | None: ...
    async def update(
        self, publication_id: PublicationId, fields: dict[str, Any],
    ) -> PublicationRecord: ...
    async def delete(self, publication_id: PublicationId) -> PublicationRecord: ...


class MediaLookup(Protocol):
    """Capability the Publication service needs from the Media service."""
    async def find_one(self, media_id: MediaId) -> MediaRecord: ...


class PostLookup(Protocol):
    """Capability the Publication service needs from the Post service."""
    async def find_one(self, post_id: PostId) -> PostRecord: ...
