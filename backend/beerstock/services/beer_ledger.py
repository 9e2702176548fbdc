"""Beer Ledger — guarded registration, lookup, deletion and stock adjustment.

Invariants:
    - Stateless: every check re-reads the store immediately before acting
    - Registration fails with BeerAlreadyRegisteredError before any write
    - Increment never persists above max; decrement never persists below zero
    - Adjustment amounts outside [1, 100] are rejected before any bound check
    - A failed operation performs no write

Design Decisions:
    - Adjustments read with for_update=True: the store holds a row lock from the
      read until save() commits, closing the read-check-write race per beer
    - Capacity at registration is opt-in (enforce_capacity_on_register), so the
      historical "quantity may exceed max at creation" behavior stays the default
    - Results returned as BeerResponse: mapping from ORM is a plain attribute copy
"""

import logging

from beerstock.core.domain_types import BeerId, LedgerFailure, StockDirection
from beerstock.core.enforce_stock import (
    check_initial_stock,
    check_stock_bounds,
    compute_adjusted_quantity,
    is_valid_adjustment,
)
from beerstock.core.errors import (
    AdjustmentAmountError,
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockNegativeError,
    BeerstockError,
)
from beerstock.core.repository_protocols import BeerLike, BeerRepository
from beerstock.models.beer import Beer
from beerstock.schemas.beer import BeerCreate, BeerResponse

logger = logging.getLogger(__name__)


class BeerLedger:
    """Catalog rules over a BeerRepository."""

    def __init__(
        self, repository: BeerRepository, enforce_capacity_on_register: bool = False,
    ):
        self.repository = repository
        self.enforce_capacity_on_register = enforce_capacity_on_register

    async def register(self, candidate: BeerCreate) -> BeerResponse:
        """Persist a new beer. Name must not be registered yet."""
        if await self.repository.find_by_name(candidate.name) is not None:
            logger.warning(
                f"Registration rejected: '{candidate.name}' already exists",
                extra={"beer_name": candidate.name,
                       "error_code": "BEER_ALREADY_REGISTERED"},
            )
            raise BeerAlreadyRegisteredError(candidate.name)

        violation = check_initial_stock(
            candidate.quantity, candidate.max, self.enforce_capacity_on_register,
        )
        if violation is not None:
            raise _stock_error(violation, None, candidate.quantity, candidate.max)

        saved = await self.repository.save(Beer(**candidate.model_dump()))
        logger.info(
            f"Beer '{saved.name}' registered",
            extra={"beer_id": saved.id, "beer_name": saved.name,
                   "quantity": saved.quantity},
        )
        return BeerResponse.model_validate(saved)

    async def find_by_name(self, name: str) -> BeerResponse:
        beer = await self.repository.find_by_name(name)
        if beer is None:
            raise BeerNotFoundError(name=name)
        return BeerResponse.model_validate(beer)

    async def find_by_id(self, beer_id: BeerId) -> BeerResponse:
        return BeerResponse.model_validate(await self._verify_exists(beer_id))

    async def list_all(self) -> list[BeerResponse]:
        beers = await self.repository.find_all()
        return [BeerResponse.model_validate(b) for b in beers]

    async def delete_by_id(self, beer_id: BeerId) -> None:
        """Delete a beer. Existence is checked first; the delete itself is a second call."""
        await self._verify_exists(beer_id)
        await self.repository.delete_by_id(beer_id)
        logger.info(f"Beer {beer_id} deleted", extra={"beer_id": beer_id})

    async def increment(self, beer_id: BeerId, quantity: int) -> BeerResponse:
        return await self.adjust_quantity(beer_id, quantity, StockDirection.INCREMENT)

    async def decrement(self, beer_id: BeerId, quantity: int) -> BeerResponse:
        return await self.adjust_quantity(beer_id, quantity, StockDirection.DECREMENT)

    async def adjust_quantity(
        self, beer_id: BeerId, delta: int, direction: StockDirection,
    ) -> BeerResponse:
        """Move stock by delta in direction.

        Increment fails above max, decrement fails below zero. A beer registered
        above capacity can be decremented but not incremented.
        """
        beer = await self._verify_exists(beer_id, for_update=True)
        if not is_valid_adjustment(delta):
            raise AdjustmentAmountError(beer_id, delta)
        new_quantity = compute_adjusted_quantity(beer.quantity, delta, direction)

        violation = check_stock_bounds(new_quantity, beer.max, direction)
        if violation is not None:
            logger.warning(
                f"Stock {direction.value} rejected for beer {beer_id}: "
                f"{beer.quantity} -> {new_quantity} (max {beer.max})",
                extra={"beer_id": beer_id, "quantity": beer.quantity,
                       "delta": delta, "error_code": violation.value},
            )
            raise _stock_error(violation, beer_id, new_quantity, beer.max)

        beer.quantity = new_quantity
        saved = await self.repository.save(beer)
        logger.info(
            f"Stock {direction.value} applied to beer {beer_id}",
            extra={"beer_id": beer_id, "quantity": saved.quantity, "delta": delta},
        )
        return BeerResponse.model_validate(saved)

    async def _verify_exists(
        self, beer_id: BeerId, for_update: bool = False,
    ) -> BeerLike:
        beer = await self.repository.find_by_id(beer_id, for_update=for_update)
        if beer is None:
            raise BeerNotFoundError(beer_id=beer_id)
        return beer


def _stock_error(
    violation: LedgerFailure, beer_id: int | None, requested: int, max_quantity: int,
) -> BeerstockError:
    """Map a stock verdict from core to its typed error."""
    if violation is LedgerFailure.STOCK_EXCEEDED:
        return BeerStockExceededError(beer_id, requested, max_quantity)
    return BeerStockNegativeError(beer_id, requested)
