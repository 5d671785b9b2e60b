"""Error Hierarchy — typed, categorized exceptions for all Person API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only two user-visible tiers: validation (400) and unclassified (500);
      not-found (404) is the single exception with its own message
    - to_response() produces the uniform envelope {success, result, message}
    - No internal details leaked in user-facing messages (public_message only)

Design Decisions:
    - Single hierarchy with PersonApiError base: FastAPI global handler catches all
    - message is for logs, public_message is for the envelope
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

REQUIRED_FIELDS_MESSAGE = "Required fields are not supplied"
GENERIC_ERROR_MESSAGE = "Oops there is an Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class PersonApiError(Exception):
    """Base exception for all Person API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str = GENERIC_ERROR_MESSAGE,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message

    def to_response(self) -> dict:
        """Convert to the uniform response envelope."""
        return {
            "success": False,
            "result": None,
            "message": self.public_message,
        }

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "person_id": self.context.person_id,
            "operation": self.context.operation,
        }


# ─── Client Errors ──────────────────────────────────────────────

class RequiredFieldsError(PersonApiError):
    """Schema rejected the input."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
            public_message=REQUIRED_FIELDS_MESSAGE,
        )


class ResourceNotFoundError(PersonApiError):
    """No document matched the requested identifier."""
    def __init__(self, resource_id: str, context: ErrorContext | None = None):
        message = f"No document found by this id: {resource_id}"
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
            public_message=message,
        )
        self.resource_id = resource_id


# ─── Unclassified Errors (500) ──────────────────────────────────

class InvalidIdentifierError(PersonApiError):
    """A path id or a stored companyId could not be read as an identifier."""
    def __init__(self, kind: str, raw: str, context: ErrorContext | None = None):
        super().__init__(
            f"Malformed {kind} identifier: {raw!r}",
            "INVALID_IDENTIFIER", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 500,
        )
        self.kind = kind
        self.raw = raw


class DatabaseError(PersonApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
