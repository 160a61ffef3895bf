"""Domain Types: identity wrappers and the derived publication state.

Invariants:
    - MediaId, PostId, PublicationId wrap database integer identities
    - PublicationState is never stored, only derived (see publication_state.py)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# --- Identity Types -------------------------------------------------

MediaId = NewType("MediaId", int)
PostId = NewType("PostId", int)
PublicationId = NewType("PublicationId", int)


# --- Enums ----------------------------------------------------------

class PublicationState(str, Enum):
    """Publication lifecycle states, derived from date vs. now."""
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


class EntityName(str, Enum):
    """Resource names used in error messages and log records."""
    MEDIA = "Media"
    POST = "Post"
    PUBLICATION = "Publication"
