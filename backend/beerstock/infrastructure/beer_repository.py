"""Beer Repository — SQLAlchemy implementation of the BeerRepository protocol.

Invariants:
    - Each save/delete commits its own transaction (one durable write per call)
    - find_by_id(for_update=True) holds a row lock until the next commit/rollback
    - A unique-name violation on insert surfaces as BeerAlreadyRegisteredError,
      never as a raw IntegrityError

Design Decisions:
    - Row lock via SELECT ... FOR UPDATE: serializes concurrent adjustments of
      the same beer on PostgreSQL; SQLite drops the clause (single writer anyway)
    - delete_by_id reports absence as False instead of raising: existence is the
      ledger's check, not the store's
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from beerstock.core.errors import BeerAlreadyRegisteredError
from beerstock.models.beer import Beer

logger = logging.getLogger(__name__)


class SqlAlchemyBeerRepository:
    """Beer persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_name(self, name: str) -> Beer | None:
        result = await self.db.execute(select(Beer).where(Beer.name == name))
        return result.scalar_one_or_none()

    async def find_by_id(
        self, beer_id: int, *, for_update: bool = False,
    ) -> Beer | None:
        query = select(Beer).where(Beer.id == beer_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def save(self, beer: Beer) -> Beer:
        """Insert when beer has no id yet, otherwise update in place."""
        is_insert = beer.id is None
        self.db.add(beer)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if is_insert and await self.find_by_name(beer.name) is not None:
                logger.warning(
                    f"Concurrent registration lost for '{beer.name}'",
                    extra={"beer_name": beer.name},
                )
                raise BeerAlreadyRegisteredError(beer.name)
            raise
        await self.db.refresh(beer)
        return beer

    async def delete_by_id(self, beer_id: int) -> bool:
        result = await self.db.execute(delete(Beer).where(Beer.id == beer_id))
        await self.db.commit()
        return result.rowcount > 0

    async def find_all(self) -> list[Beer]:
        result = await self.db.execute(select(Beer).order_by(Beer.id))
        return list(result.scalars().all())
