"""Post Schemas: title/text required; image optional but a valid URL when given.

Invariants:
    - image is stored as the trimmed string the client sent (no URL normalization)
    - a scheme is optional: "www.example.com/a.png" is read as http:// but
      then needs a dotted host, so bare words are still refused
"""

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, field_validator

from mediahub.schemas.common import TrimmedStr

_http_url = TypeAdapter(HttpUrl)


def _parse_image_url(value: str) -> HttpUrl:
    if "://" in value:
        return _http_url.validate_python(value)
    url = _http_url.validate_python(f"http://{value}")
    if "." not in (url.host or ""):
        raise ValueError("image must be a URL")
    return url


class PostCreate(BaseModel):
    title: TrimmedStr
    text: TrimmedStr
    image: str | None = None

    @field_validator("image")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("image cannot be empty or whitespace")
        _parse_image_url(v)
        return v


class PostUpdate(PostCreate):
    """PUT body: full replacement, an omitted image clears it."""


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    text: str
    image: str | None = None
