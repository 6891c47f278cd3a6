"""Error Hierarchy: typed, categorized exceptions for all StrideFund failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Callers branch on the class or the code, never on message text
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with StrideFundError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    PARTIAL_WRITE = "partial_write"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    user_id: str | None = None
    details: dict[str, Any] | None = None


class StrideFundError(Exception):
    """Base exception for all StrideFund errors."""

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
                    "operation": self.context.operation,
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                    "details": self.context.details,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(StrideFundError):
    """Input is malformed or out of range; raised before any write."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class UnauthorizedError(StrideFundError):
    """No authenticated caller identity on a protected operation."""
    def __init__(self, message: str = "User not authenticated", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(StrideFundError):
    """Caller is authenticated but does not own the resource."""
    def __init__(
        self, resource_type: str, resource_id: str, action: str = "modify",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"Not allowed to {action} {resource_type} '{resource_id}'",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 403,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceNotFoundError(StrideFundError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(StrideFundError):
    """Write collides with existing state (duplicate membership, unique index)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class SettlementIncompleteError(StrideFundError):
    """Activity was recorded but the parent aggregate (cause or campaign) was not updated.

    The runner record is already committed; callers must not retry blindly.
    """
    def __init__(
        self, parent_id: str, runner_id: str,
        resource_type: str = "Cause", operation: str = "record_cause_activity",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.resource_type = resource_type
        ctx.resource_id = parent_id
        ctx.details = {"runner_id": runner_id}
        super().__init__(
            f"Activity recorded as runner '{runner_id}' but {resource_type.lower()} "
            f"'{parent_id}' was not found; its totals were not updated",
            "SETTLEMENT_INCOMPLETE", ErrorCategory.PARTIAL_WRITE,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.parent_id = parent_id
        self.runner_id = runner_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(StrideFundError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
