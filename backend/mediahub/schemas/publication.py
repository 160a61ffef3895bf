"""Publication Schemas: camelCase wire format over snake_case attributes.

Invariants:
    - mediaId / postId are positive integers
    - date / after are ISO-8601 timestamps, naive values read as UTC
    - published is true only for the exact string "true";
      any other value means "no published filter"

Design Decisions:
    - alias_generator=to_camel with populate_by_name: JSON speaks camelCase,
      Python code and ORM attributes stay snake_case
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from mediahub.schemas.common import PositiveId, UTCTimestamp


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PublicationCreate(_CamelModel):
    media_id: PositiveId
    post_id: PositiveId
    date: UTCTimestamp


class PublicationUpdate(PublicationCreate):
    """PUT body: full replacement, same rules as creation."""


class PublicationResponse(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    media_id: int
    post_id: int
    date: UTCTimestamp


class PublicationFilter(BaseModel):
    """Query string of GET /publications."""
    published: bool = False
    after: UTCTimestamp | None = None

    @field_validator("published", mode="before")
    @classmethod
    def coerce_published(cls, v: object) -> bool:
        if isinstance(v, bool):
            return v
        return v == "true"
