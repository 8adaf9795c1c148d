"""Error Hierarchy — typed, categorized exceptions for all Chirp failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised at the point of violation and never retried
    - to_response() produces the REST envelope used by the HTTP error handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ChirpError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    author_name: str | None = None
    cheep_id: int | None = None


class ChirpError(Exception):
    """Base exception for all Chirp errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(ChirpError):
    """Argument is missing or outside its valid range."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundError(ChirpError):
    """Referenced author or cheep does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateError(ChirpError):
    """A unique author attribute is already taken."""
    def __init__(
        self, message: str, code: str = "DUPLICATE", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class DuplicateNameError(DuplicateError):
    """Author name already exists."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Author with name '{name}' already exists",
            "DUPLICATE_NAME", context,
        )
        self.name = name


class DuplicateEmailError(DuplicateError):
    """Author email already exists."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            f"Author with email '{email}' already exists",
            "DUPLICATE_EMAIL", context,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ChirpError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
