"""Publication Repository: adds date-window filtering to the generic CRUD."""

from datetime import datetime

from sqlalchemy import select

from mediahub.core.domain_types import EntityName
from mediahub.models.publication import Publication
from mediahub.repositories.base import SqlAlchemyRepository


class PublicationRepository(SqlAlchemyRepository[Publication]):
    model = Publication
    entity_name = EntityName.PUBLICATION.value

    async def find_many(
        self, *, date_lte: datetime | None = None, date_gt: datetime | None = None,
    ) -> list[Publication]:
        """Publications with date <= date_lte and date > date_gt (each optional)."""
        stmt = select(Publication)
        if date_lte is not None:
            stmt = stmt.where(Publication.date <= date_lte)
        if date_gt is not None:
            stmt = stmt.where(Publication.date > date_gt)
        result = await self.session.execute(stmt.order_by(Publication.id))
        return list(result.scalars().all())
