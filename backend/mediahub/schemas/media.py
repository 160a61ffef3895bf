"""Media Schemas: title and username are required, trimmed, non-empty."""

from pydantic import BaseModel, ConfigDict

from mediahub.schemas.common import TrimmedStr


class MediaCreate(BaseModel):
    title: TrimmedStr
    username: TrimmedStr


class MediaUpdate(MediaCreate):
    """PUT body: full replacement, same rules as creation."""


class MediaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    username: str
