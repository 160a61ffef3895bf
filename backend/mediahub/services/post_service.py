"""Post Service: deletion-guard rules for Post. Posts have no uniqueness rule."""

import logging

from mediahub.core.domain_types import EntityName, PostId
from mediahub.core.errors import (
    ForeignKeyViolationError, ResourceInUseError, ResourceNotFoundError,
)
from mediahub.core.repository_protocols import PostRecord, PostRepository

logger = logging.getLogger(__name__)

_ENTITY = EntityName.POST.value


class PostService:
    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def create(
        self, title: str, text: str, image: str | None = None,
    ) -> PostRecord:
        post = await self.repository.create(
            {"title": title, "text": text, "image": image},
        )
        logger.info(
            f"Post {post.id} created",
            extra={"entity": _ENTITY, "entity_id": post.id},
        )
        return post

    async def find_all(self) -> list[PostRecord]:
        return await self.repository.find_many()

    async def find_one(self, post_id: PostId) -> PostRecord:
        post = await self.repository.find_unique(post_id)
        if post is None:
            raise ResourceNotFoundError(_ENTITY, post_id)
        return post

    async def update(
        self, post_id: PostId, title: str, text: str, image: str | None = None,
    ) -> PostRecord:
        await self.find_one(post_id)
        post = await self.repository.update(
            post_id, {"title": title, "text": text, "image": image},
        )
        logger.info(
            f"Post {post_id} updated",
            extra={"entity": _ENTITY, "entity_id": post_id},
        )
        return post

    async def remove(self, post_id: PostId) -> PostRecord:
        """Delete a Post; refused (403) while a Publication references it."""
        await self.find_one(post_id)
        try:
            post = await self.repository.delete(post_id)
        except ForeignKeyViolationError as e:
            logger.warning(
                f"Post {post_id} still referenced, delete refused",
                extra={"entity": _ENTITY, "entity_id": post_id},
            )
            raise ResourceInUseError(_ENTITY, post_id) from e
        logger.info(
            f"Post {post_id} deleted",
            extra={"entity": _ENTITY, "entity_id": post_id},
        )
        return post
