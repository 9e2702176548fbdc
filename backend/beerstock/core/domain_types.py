"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BeerId wraps the store-assigned integer key — never reassigned after insert
    - BeerType is a closed set; values equal names so they serialize as-is
    - LedgerFailure is the complete list of business-rule outcomes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BeerId = NewType("BeerId", int)


# ─── Field Limits ────────────────────────────────────────────────

NAME_MAX_LENGTH: int = 200
BRAND_MAX_LENGTH: int = 200
MAX_CAPACITY: int = 500          # ceiling for Beer.max
MAX_INITIAL_QUANTITY: int = 100  # ceiling for quantity at registration
MIN_ADJUSTMENT: int = 1          # an earlier API revision accepted 0
MAX_ADJUSTMENT: int = 100


# ─── Enums ───────────────────────────────────────────────────────

class BeerType(str, Enum):
    """Beer styles accepted by the catalog."""
    LAGER = "LAGER"
    PILSEN = "PILSEN"
    MALTE = "MALTE"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"
    PORTER = "PORTER"


class StockDirection(str, Enum):
    """Direction of a quantity adjustment."""
    INCREMENT = "increment"
    DECREMENT = "decrement"


class LedgerFailure(str, Enum):
    """Business-rule failure kinds raised by the ledger."""
    ALREADY_REGISTERED = "already_registered"
    NOT_FOUND = "not_found"
    STOCK_EXCEEDED = "stock_exceeded"
    STOCK_NEGATIVE = "stock_negative"
