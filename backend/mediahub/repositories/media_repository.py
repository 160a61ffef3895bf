from typing import Any

from sqlalchemy import select

from mediahub.core.domain_types import EntityName
from mediahub.models.media import Media
from mediahub.repositories.base import SqlAlchemyRepository


class MediaRepository(SqlAlchemyRepository[Media]):
    model = Media
    entity_name = EntityName.MEDIA.value

    async def find_first(self, **match: Any) -> Media | None:
        """First Media whose columns equal every keyword given."""
        stmt = select(Media).filter_by(**match).order_by(Media.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
