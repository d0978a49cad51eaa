"""Error Hierarchy — typed, categorized exceptions for calculator failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Division by zero is NOT an exception: it is the "Error" display sentinel
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CalculatorError base: FastAPI global handler catches all
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    calculator_id: str | None = None
    key: str | None = None
    debug_info: dict[str, Any] | None = None


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

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
                    "calculator_id": self.context.calculator_id,
                    "key": self.context.key,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidKeyError(CalculatorError):
    """Key event outside the keypad (not a digit, operator or known label)."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.key = key
        super().__init__(
            f"Unknown key '{key}'",
            "INVALID_KEY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class InvalidPrecisionError(CalculatorError):
    """Precision outside the supported 0–4 range."""
    def __init__(self, precision: int, context: ErrorContext | None = None):
        super().__init__(
            f"Precision must be between 0 and 4, got {precision}",
            "INVALID_PRECISION", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.precision = precision


class HistoryEntryNotFoundError(CalculatorError):
    """Selected history index does not exist."""
    def __init__(self, index: int, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"History entry #{index} not found ({size} entries)",
            "HISTORY_ENTRY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.index = index


class ResourceNotFoundError(CalculatorError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class SessionLimitError(CalculatorError):
    """Registry already holds the configured maximum of live calculators."""
    def __init__(self, max_sessions: int, context: ErrorContext | None = None):
        super().__init__(
            f"Calculator session limit reached ({max_sessions})",
            "SESSION_LIMIT_REACHED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.max_sessions = max_sessions
