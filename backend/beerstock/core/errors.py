"""Error Hierarchy — typed, categorized exceptions for all Beerstock failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Ledger errors (400/404) carry exactly one LedgerFailure kind
    - Infrastructure errors (500-level) have no kind and are never retried
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with BeerstockError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from beerstock.core.domain_types import LedgerFailure, MIN_ADJUSTMENT, MAX_ADJUSTMENT


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
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    beer_id: int | None = None
    beer_name: str | None = None
    debug_info: dict[str, Any] | None = None


class BeerstockError(Exception):
    """Base exception for all Beerstock errors."""

    kind: LedgerFailure | None = None

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
                    "beer_id": self.context.beer_id,
                    "beer_name": self.context.beer_name,
                },
            }
        }


# ─── Ledger Errors (400-level) ──────────────────────────────────

class BeerAlreadyRegisteredError(BeerstockError):
    """Registration attempted for a name that already exists."""

    kind = LedgerFailure.ALREADY_REGISTERED

    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.beer_name = name
        super().__init__(
            f"Beer with name '{name}' already registered in the system.",
            "BEER_ALREADY_REGISTERED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.name = name


class BeerNotFoundError(BeerstockError):
    """Lookup by name or id found no record."""

    kind = LedgerFailure.NOT_FOUND

    def __init__(
        self,
        name: str | None = None,
        beer_id: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.beer_name = name
        ctx.beer_id = beer_id
        if name is not None:
            message = f"Beer with name '{name}' not found in the system."
        elif beer_id is not None:
            message = f"Beer with id {beer_id} not found in the system."
        else:
            message = "Beer not found in the system."
        super().__init__(
            message, "BEER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class BeerStockExceededError(BeerstockError):
    """Quantity would rise above the beer's max capacity."""

    kind = LedgerFailure.STOCK_EXCEEDED

    def __init__(
        self, beer_id: int | None, requested: int, max_quantity: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.beer_id = beer_id
        super().__init__(
            f"Resulting quantity {requested} exceeds max stock capacity "
            f"of {max_quantity}.",
            "BEER_STOCK_EXCEEDED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.requested = requested
        self.max_quantity = max_quantity


class BeerStockNegativeError(BeerstockError):
    """Quantity would drop below zero."""

    kind = LedgerFailure.STOCK_NEGATIVE

    def __init__(
        self, beer_id: int | None, requested: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.beer_id = beer_id
        super().__init__(
            f"Resulting quantity {requested} would leave the stock negative.",
            "BEER_STOCK_NEGATIVE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.requested = requested


class AdjustmentAmountError(BeerstockError):
    """Adjustment amount outside the accepted range."""
    def __init__(
        self, beer_id: int | None, delta: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.beer_id = beer_id
        super().__init__(
            f"Adjustment amount {delta} must be between {MIN_ADJUSTMENT} "
            f"and {MAX_ADJUSTMENT}.",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.delta = delta


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BeerstockError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
