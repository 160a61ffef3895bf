"""Error Hierarchy: typed, categorized exceptions for every mediahub failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors carry 4xx statuses; infrastructure errors carry 5xx
    - to_response() produces the REST envelope; no internal details in messages
    - Constraint signals (foreign key, unique) are distinguishable from "not found"

Design Decisions:
    - Single hierarchy rooted at MediaHubError: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None


class MediaHubError(Exception):
    """Base exception for all mediahub errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# --- Domain Errors (400-level) --------------------------------------

class ResourceNotFoundError(MediaHubError):
    """Requested resource, or a referenced one, does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=resource_type, entity_id=resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateResourceError(MediaHubError):
    """A record with the same unique key already exists."""
    def __init__(
        self, resource_type: str, key: dict[str, Any], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=resource_type)
        fields = ", ".join(f"{k}={v!r}" for k, v in key.items())
        super().__init__(
            f"{resource_type} with {fields} already exists",
            "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.key = key


class ResourceInUseError(MediaHubError):
    """Delete blocked: the record is still referenced by a Publication."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=resource_type, entity_id=resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' is referenced by a publication",
            "RESOURCE_IN_USE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 403,
        )


class PublicationLockedError(MediaHubError):
    """Update blocked: the publication date has already passed."""
    def __init__(self, publication_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext(entity="Publication", entity_id=publication_id)
        super().__init__(
            f"Publication '{publication_id}' is already published and cannot be changed",
            "PUBLICATION_LOCKED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 403,
        )


# --- Infrastructure Errors (500-level) ------------------------------

class DatabaseError(MediaHubError):
    """Database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
        code: str = "DATABASE_ERROR",
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ForeignKeyViolationError(DatabaseError):
    """A write or delete broke a foreign-key constraint."""
    def __init__(self, table: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"foreign key constraint on '{table}' violated", operation,
            context, code="FOREIGN_KEY_VIOLATION",
        )
        self.table = table


class UniqueViolationError(DatabaseError):
    """A write broke a unique constraint."""
    def __init__(self, table: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"unique constraint on '{table}' violated", operation,
            context, code="UNIQUE_VIOLATION",
        )
        self.table = table
