"""Error Hierarchy — typed, categorized exceptions for every expense-tracker failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are client-correctable; storage errors (500-level) are not
    - to_response() produces the REST envelope consumed by api/error_handlers.py
    - No internal details leaked in user-facing messages

Design Decisions:
    - ErrorCategory is the explicit error-kind enumeration: callers branch on
      exc.category, never on the type of a third-party exception
    - FieldViolation as dataclass: validation failures are structured
      {field, rule, message} records, formatted into wire form by the API layer
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
    """Error kinds surfaced by the domain layer."""
    VALIDATION = "validation"
    REFERENCE = "reference"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field rule, e.g. FieldViolation("name", "min_length", "...")."""
    field: str
    rule: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "rule": self.rule, "message": self.message}


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ExpenseTrackerError(Exception):
    """Base exception for all expense-tracker errors."""

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

class FieldValidationError(ExpenseTrackerError):
    """Input failed a domain rule (length bounds, amount, date)."""
    def __init__(self, violation: FieldViolation, context: ErrorContext | None = None):
        super().__init__(
            violation.message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violation = violation

    @property
    def field(self) -> str:
        return self.violation.field

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = [self.violation.to_dict()]
        return body


class InvalidReferenceError(ExpenseTrackerError):
    """A referenced entity does not exist at write time."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type.lower()} not found",
            "REFERENCE_ERROR", ErrorCategory.REFERENCE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceNotFoundError(ExpenseTrackerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(ExpenseTrackerError):
    """Persistence layer failed for reasons opaque to the domain."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
