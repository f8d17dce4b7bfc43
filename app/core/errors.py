"""Error Hierarchy — typed, categorized exceptions for all Places API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Category is the error kind; HTTP status is derived from it at the API boundary
    - to_response() produces the structured envelope; to_legacy_response() the old flat body
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PlacesError base: FastAPI global handler catches all (ADR: uniform error shape)
    - legacy_body per error: the pre-taxonomy clients matched on exact bodies
      ({"message": ...}, {"status": "Failed"}), so those are kept verbatim
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error kinds — each maps to exactly one HTTP status in strict mode."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    place_id: str | None = None


class PlacesError(Exception):
    """Base exception for all Places API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        legacy_body: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.legacy_body = legacy_body

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
                    "user_id": self.context.user_id,
                    "place_id": self.context.place_id,
                },
            }
        }

    def to_legacy_response(self) -> dict:
        """Body served to clients on the legacy contract."""
        if self.legacy_body is not None:
            return dict(self.legacy_body)
        return {"name": self.code, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(PlacesError):
    """Bearer token missing, malformed, expired or without a usable subject."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Authentication failed: {reason}",
            "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context,
        )
        self.reason = reason


class ResourceNotFoundError(PlacesError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        context: ErrorContext | None = None,
        legacy_body: dict | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, legacy_body,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RelationExistsError(PlacesError):
    """The user already has this place saved."""
    MESSAGE = "User-Place relation already exists"

    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            self.MESSAGE, "RELATION_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, {"message": self.MESSAGE},
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PlacesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
