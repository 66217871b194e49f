"""Error Hierarchy — typed, categorized exceptions for every registry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity);
      code and severity are surfaced to logs via log_extra()
    - Validation, not-found and constraint errors are 400/404; storage errors are 500
    - to_response() produces the plain-text client body
    - No storage detail ever reaches the client message (kept on .cause only)

Design Decisions:
    - Single hierarchy with ElectionRegistryError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - ConstraintViolationError is raised by repositories as a typed signal, so routes
      never inspect driver error text
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None


class ElectionRegistryError(Exception):
    """Base exception for all registry errors."""

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

    def to_response(self) -> str:
        """Plain-text body written to the client."""
        return self.message

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "severity": self.severity.value,
            "resource_type": self.context.resource_type,
            "resource_id": self.context.resource_id,
        }


# ─── Validation Errors (400) ────────────────────────────────────

class EmptyNameError(ElectionRegistryError):
    """Entity name decoded to the empty string."""
    def __init__(self, entity_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(resource_type=entity_type)
        super().__init__(
            "Empty name forbidden.", "EMPTY_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class InvalidIdentifierError(ElectionRegistryError):
    """Path identifier is not a non-negative integer."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID", "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw = raw


class MalformedPayloadError(ElectionRegistryError):
    """Request body is not a JSON object with a string name."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Malformed request body.", "MALFORMED_PAYLOAD",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


# ─── Persistence Outcomes ───────────────────────────────────────

class ResourceNotFoundError(ElectionRegistryError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(
            resource_type=resource_type, resource_id=str(resource_id),
        )
        super().__init__(
            "Not found", "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConstraintViolationError(ElectionRegistryError):
    """Uniqueness rule rejected the write."""
    def __init__(self, resource_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(resource_type=resource_type)
        super().__init__(
            "Name taken.", "NAME_TAKEN", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.resource_type = resource_type


class StorageError(ElectionRegistryError):
    """Any other persistence failure. The cause is logged, never returned."""
    def __init__(
        self, operation: str, cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Server error", "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.cause = cause

    def __str__(self) -> str:
        return f"Storage {self.operation} failed: {self.cause!r}"
