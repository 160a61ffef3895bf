"""Shared field types for request schemas.

Invariants:
    - TrimmedStr is stripped before the non-empty check
    - Timestamps are normalized to aware UTC
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field, StringConstraints

from mediahub.core.publication_state import as_utc


def _strip(value: object) -> object:
    if isinstance(value, str):
        return value.strip()
    return value


TrimmedStr = Annotated[
    str,
    BeforeValidator(_strip),
    StringConstraints(min_length=1),
]

PositiveId = Annotated[int, Field(gt=0, strict=True)]

UTCTimestamp = Annotated[datetime, AfterValidator(as_utc)]
