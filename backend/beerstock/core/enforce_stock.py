"""Stock Enforcement — pure quantity-bound checks for registration and adjustment.

Invariants:
    - All functions are PURE: return a verdict, never mutate or persist
    - The ledger applies the write only when the verdict is None
    - Increment fails only above max; decrement fails only below zero
    - Adjustment amounts outside [MIN_ADJUSTMENT, MAX_ADJUSTMENT] never reach
      the bound checks

Design Decisions:
    - Verdicts are LedgerFailure members rather than exceptions: the shell owns
      the mapping to typed errors (and their context) in one place
    - Decrement ignores max: a beer registered above capacity can still be
      drawn down
    - Registration does not enforce quantity <= max unless asked to
      (enforce_capacity flag, driven by settings)
"""

from beerstock.core.domain_types import (
    LedgerFailure,
    StockDirection,
    MIN_ADJUSTMENT,
    MAX_ADJUSTMENT,
)


def is_valid_adjustment(delta: int) -> bool:
    return MIN_ADJUSTMENT <= delta <= MAX_ADJUSTMENT


def compute_adjusted_quantity(
    current: int, delta: int, direction: StockDirection,
) -> int:
    """Apply delta to the current quantity in the given direction."""
    if direction is StockDirection.INCREMENT:
        return current + delta
    return current - delta


def check_stock_bounds(
    quantity: int, max_quantity: int, direction: StockDirection,
) -> LedgerFailure | None:
    """Return the bound the adjusted quantity violates for this direction, or None."""
    if direction is StockDirection.INCREMENT:
        if quantity > max_quantity:
            return LedgerFailure.STOCK_EXCEEDED
        return None
    if quantity < 0:
        return LedgerFailure.STOCK_NEGATIVE
    return None


def check_initial_stock(
    quantity: int, max_quantity: int, enforce_capacity: bool = False,
) -> LedgerFailure | None:
    """Registration-time check. Negative stock is always rejected; capacity only when enforced."""
    if quantity < 0:
        return LedgerFailure.STOCK_NEGATIVE
    if enforce_capacity and quantity > max_quantity:
        return LedgerFailure.STOCK_EXCEEDED
    return None
