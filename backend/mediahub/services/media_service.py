"""Media Service: uniqueness and deletion-guard rules for Media.

Invariants:
    - (title, username) is unique: create and update raise DuplicateResourceError
    - update checks the pair BEFORE resolving the target id, and does not
      exclude the target itself (same policy as create)
    - remove raises ResourceInUseError while any Publication references the Media

Design Decisions:
    - Dual uniqueness check: find_first here for the clean 409, plus the
      database unique constraint for races (UniqueViolationError -> 409)
"""

import logging

from mediahub.core.domain_types import EntityName, MediaId
from mediahub.core.errors import (
    DuplicateResourceError, ForeignKeyViolationError, ResourceInUseError,
    ResourceNotFoundError, UniqueViolationError,
)
from mediahub.core.repository_protocols import MediaRecord, MediaRepository

logger = logging.getLogger(__name__)

_ENTITY = EntityName.MEDIA.value


class MediaService:
    """Create / read / update / delete Media outlets."""

    def __init__(self, repository: MediaRepository):
        self.repository = repository

    async def create(self, title: str, username: str) -> MediaRecord:
        await self._ensure_pair_is_free(title, username)
        try:
            media = await self.repository.create(
                {"title": title, "username": username},
            )
        except UniqueViolationError as e:
            raise self._duplicate(title, username) from e
        logger.info(
            f"Media {media.id} created",
            extra={"entity": _ENTITY, "entity_id": media.id},
        )
        return media

    async def find_all(self) -> list[MediaRecord]:
        return await self.repository.find_many()

    async def find_one(self, media_id: MediaId) -> MediaRecord:
        media = await self.repository.find_unique(media_id)
        if media is None:
            raise ResourceNotFoundError(_ENTITY, media_id)
        return media

    async def update(
        self, media_id: MediaId, title: str, username: str,
    ) -> MediaRecord:
        await self._ensure_pair_is_free(title, username)
        await self.find_one(media_id)
        try:
            media = await self.repository.update(
                media_id, {"title": title, "username": username},
            )
        except UniqueViolationError as e:
            raise self._duplicate(title, username) from e
        logger.info(
            f"Media {media_id} updated",
            extra={"entity": _ENTITY, "entity_id": media_id},
        )
        return media

    async def remove(self, media_id: MediaId) -> MediaRecord:
        await self.find_one(media_id)
        try:
            media = await self.repository.delete(media_id)
        except ForeignKeyViolationError as e:
            logger.warning(
                f"Media {media_id} still referenced, delete refused",
                extra={"entity": _ENTITY, "entity_id": media_id},
            )
            raise ResourceInUseError(_ENTITY, media_id) from e
        logger.info(
            f"Media {media_id} deleted",
            extra={"entity": _ENTITY, "entity_id": media_id},
        )
        return media

    async def _ensure_pair_is_free(self, title: str, username: str) -> None:
        existing = await self.repository.find_first(title=title, username=username)
        if existing is not None:
            logger.warning(
                f"Duplicate media pair rejected (matches {existing.id})",
                extra={"entity": _ENTITY, "entity_id": existing.id},
            )
            raise self._duplicate(title, username)

    @staticmethod
    def _duplicate(title: str, username: str) -> DuplicateResourceError:
        return DuplicateResourceError(
            _ENTITY, {"title": title, "username": username},
        )
