"""Publication Service: cross-entity validation and time-based immutability.

Invariants:
    - create/update resolve BOTH references (Media first, then Post) before
      writing; a missing one raises ResourceNotFoundError and nothing is written
    - update checks the STORED date, not the incoming one: once published the
      record is immutable (PublicationLockedError)
    - remove has no immutability or reference guard
    - the clock is read once per operation

Design Decisions:
    - Check-then-write is not one transaction: a reference deleted between the
      check and the insert surfaces as ForeignKeyViolationError from the store,
      reported here as ResourceNotFoundError
    - find_all(published=False) applies no upper bound, same as omitting it
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from mediahub.core.domain_types import (
    EntityName, MediaId, PostId, PublicationId,
)
from mediahub.core.errors import (
    ForeignKeyViolationError, PublicationLockedError, ResourceNotFoundError,
)
from mediahub.core.publication_state import as_utc, can_update
from mediahub.core.repository_protocols import (
    MediaLookup, PostLookup, PublicationRecord, PublicationRepository,
)

logger = logging.getLogger(__name__)

_ENTITY = EntityName.PUBLICATION.value

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PublicationService:
    """Schedule Posts on Media and guard published records."""

    def __init__(
        self,
        repository: PublicationRepository,
        medias: MediaLookup,
        posts: PostLookup,
        clock: Clock = utc_now,
    ):
        self.repository = repository
        self.medias = medias
        self.posts = posts
        self.clock = clock

    async def create(
        self, media_id: MediaId, post_id: PostId, date: datetime,
    ) -> PublicationRecord:
        await self._ensure_references_exist(media_id, post_id)
        fields = {"media_id": media_id, "post_id": post_id, "date": as_utc(date)}
        try:
            publication = await self.repository.create(fields)
        except ForeignKeyViolationError as e:
            raise self._reference_vanished(media_id, post_id) from e
        logger.info(
            f"Publication {publication.id} scheduled for {fields['date'].isoformat()}",
            extra={"entity": _ENTITY, "entity_id": publication.id},
        )
        return publication

    async def find_all(
        self, published: bool | None = None, after: datetime | None = None,
    ) -> list[PublicationRecord]:
        """Publications filtered by state and/or a lower date bound (AND-ed)."""
        date_lte = self.clock() if published else None
        date_gt = as_utc(after) if after is not None else None
        return await self.repository.find_many(date_lte=date_lte, date_gt=date_gt)

    async def find_one(self, publication_id: PublicationId) -> PublicationRecord:
        publication = await self.repository.find_unique(publication_id)
        if publication is None:
            raise ResourceNotFoundError(_ENTITY, publication_id)
        return publication

    async def update(
        self,
        publication_id: PublicationId,
        media_id: MediaId,
        post_id: PostId,
        date: datetime,
    ) -> PublicationRecord:
        current = await self.find_one(publication_id)
        if not can_update(current.date, self.clock()):
            logger.warning(
                f"Publication {publication_id} already published, update refused",
                extra={"entity": _ENTITY, "entity_id": publication_id},
            )
            raise PublicationLockedError(publication_id)

        await self._ensure_references_exist(media_id, post_id)
        fields = {"media_id": media_id, "post_id": post_id, "date": as_utc(date)}
        try:
            publication = await self.repository.update(publication_id, fields)
        except ForeignKeyViolationError as e:
            raise self._reference_vanished(media_id, post_id) from e
        logger.info(
            f"Publication {publication_id} rescheduled",
            extra={"entity": _ENTITY, "entity_id": publication_id},
        )
        return publication

    async def remove(self, publication_id: PublicationId) -> PublicationRecord:
        await self.find_one(publication_id)
        publication = await self.repository.delete(publication_id)
        logger.info(
            f"Publication {publication_id} deleted",
            extra={"entity": _ENTITY, "entity_id": publication_id},
        )
        return publication

    async def _ensure_references_exist(
        self, media_id: MediaId, post_id: PostId,
    ) -> None:
        await self.medias.find_one(media_id)
        await self.posts.find_one(post_id)

    @staticmethod
    def _reference_vanished(
        media_id: MediaId, post_id: PostId,
    ) -> ResourceNotFoundError:
        logger.warning(
            f"Media {media_id} or Post {post_id} deleted during publication write",
            extra={"entity": _ENTITY},
        )
        return ResourceNotFoundError(
            f"{EntityName.MEDIA.value} or {EntityName.POST.value}",
            media_id,
        )
