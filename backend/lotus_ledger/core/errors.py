"""Error Hierarchy: typed, categorized exceptions for all Lotus Ledger failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Lookups that match nothing (including unparsable ids) are GameNotFoundError (404)
    - Store faults are StoreError (500) and never carry the driver's message
    - Every HTTP error body, including validation and unexpected failures,
      comes from LedgerError.to_response()

Design Decisions:
    - Single hierarchy with LedgerError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from lotus_ledger.core.domain_types import StoreOperation


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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    game_id: str | None = None
    operation: str | None = None


class LedgerError(Exception):
    """Base exception for all Lotus Ledger errors."""

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
                    "game_id": self.context.game_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(LedgerError):
    """Request body, path or query parameters failed schema validation."""
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class GameNotFoundError(LedgerError):
    """No game matches the identifier, or the identifier is malformed."""
    def __init__(self, game_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.game_id = str(game_id)
        super().__init__(
            f"Game '{game_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.game_id = game_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(LedgerError):
    """The document store failed: connection, write, or read fault."""
    def __init__(
        self,
        message: str,
        operation: StoreOperation,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation.value
        super().__init__(
            f"Store {operation.value} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class UnexpectedError(LedgerError):
    """Anything that escaped the hierarchy; the cause is logged, never returned."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
