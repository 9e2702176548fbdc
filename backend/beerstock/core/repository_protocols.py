"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the pure checks in enforce_stock are never async themselves
"""

from typing import Protocol

from beerstock.core.domain_types import BeerType


class BeerLike(Protocol):
    """Structural contract for Beer records passed between store and ledger.

    Avoids coupling the ledger to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int | None
    name: str
    brand: str
    type: BeerType
    quantity: int
    max: int


class BeerRepository(Protocol):
    """Contract for beer persistence — implemented by shell."""
    async def find_by_name(self, name: str) -> BeerLike | None: ...
    async def find_by_id(
        self, beer_id: int, *, for_update: bool = False,
    ) -> BeerLike | None: ...
    async def save(self, beer: BeerLike) -> BeerLike: ...
    async def delete_by_id(self, beer_id: int) -> bool: ...
    async def find_all(self) -> list[BeerLike]: ...
