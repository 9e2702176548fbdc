"""Beer Routes — REST surface of the catalog ledger.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Every handler delegates to BeerLedger; no stock arithmetic here
    - Ledger errors propagate to the global BeerstockError handler (400/404)

Design Decisions:
    - GET /{name} and DELETE /{beer_id} share a path shape; the method tells
      them apart, matching the established public API
    - Ledger built per request from the request's session (get_ledger dependency)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from beerstock.config import get_settings
from beerstock.core.domain_types import BeerId
from beerstock.infrastructure.beer_repository import SqlAlchemyBeerRepository
from beerstock.infrastructure.database import get_db
from beerstock.schemas.beer import BeerCreate, BeerResponse, QuantityAdjustment
from beerstock.services.beer_ledger import BeerLedger

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/beers", tags=["beers"])

_NOT_FOUND = {"description": "Beer with given name or id not found"}
_BAD_REQUEST = {"description": "Invalid request data or stock rule violated"}


def get_ledger(db: AsyncSession = Depends(get_db)) -> BeerLedger:
    settings = get_settings()
    return BeerLedger(
        SqlAlchemyBeerRepository(db),
        enforce_capacity_on_register=settings.enforce_capacity_on_register,
    )


@router.get(
    "", response_model=list[BeerResponse],
    summary="List all beers registered in the system",
)
async def list_beers(ledger: BeerLedger = Depends(get_ledger)):
    return await ledger.list_all()


@router.get(
    "/{name}", response_model=BeerResponse,
    summary="Find a beer by its name",
    responses={404: _NOT_FOUND},
)
async def find_by_name(name: str, ledger: BeerLedger = Depends(get_ledger)):
    return await ledger.find_by_name(name)


@router.post(
    "", response_model=BeerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new beer",
    responses={400: {"description": "Missing fields, wrong ranges, or name already registered"}},
)
async def create_beer(
    body: BeerCreate, ledger: BeerLedger = Depends(get_ledger),
):
    return await ledger.register(body)


@router.delete(
    "/{beer_id}", status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a beer by its id",
    responses={404: _NOT_FOUND},
)
async def delete_by_id(
    beer_id: int, ledger: BeerLedger = Depends(get_ledger),
) -> None:
    await ledger.delete_by_id(BeerId(beer_id))


@router.patch(
    "/{beer_id}/increment", response_model=BeerResponse,
    summary="Increase a beer's stock",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
async def increment(
    beer_id: int, body: QuantityAdjustment,
    ledger: BeerLedger = Depends(get_ledger),
):
    return await ledger.increment(BeerId(beer_id), body.quantity)


@router.patch(
    "/{beer_id}/decrement", response_model=BeerResponse,
    summary="Decrease a beer's stock",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
)
async def decrement(
    beer_id: int, body: QuantityAdjustment,
    ledger: BeerLedger = Depends(get_ledger),
):
    return await ledger.decrement(BeerId(beer_id), body.quantity)
