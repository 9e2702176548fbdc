"""SQLAlchemy Beer Repository — store contract against in-memory SQLite.

Invariants:
    - save() assigns an id on insert and updates in place afterwards
    - delete_by_id() reports absence as False
    - a duplicate name on insert surfaces as BeerAlreadyRegisteredError
    - the ledger runs end-to-end on this store
"""

import pytest

from beerstock.core.domain_types import BeerId, BeerType
from beerstock.core.errors import BeerAlreadyRegisteredError, BeerStockExceededError
from beerstock.infrastructure.beer_repository import SqlAlchemyBeerRepository
from beerstock.models.beer import Beer
from beerstock.services.beer_ledger import BeerLedger


@pytest.fixture
def repo(test_db) -> SqlAlchemyBeerRepository:
    return SqlAlchemyBeerRepository(test_db)


def _beer(name: str = "Brahma", **overrides) -> Beer:
    fields = dict(
        name=name, brand="Ambev", type=BeerType.LAGER, quantity=10, max=50,
    )
    fields.update(overrides)
    return Beer(**fields)


async def test_save_assigns_id(repo):
    saved = await repo.save(_beer())
    assert saved.id is not None


async def test_find_by_name_and_id(repo):
    saved = await repo.save(_beer())

    assert (await repo.find_by_name("Brahma")).id == saved.id
    assert (await repo.find_by_id(saved.id)).name == "Brahma"
    assert await repo.find_by_name("Skol") is None
    assert await repo.find_by_id(saved.id + 1) is None


async def test_find_by_id_for_update_returns_row(repo):
    saved = await repo.save(_beer())
    locked = await repo.find_by_id(saved.id, for_update=True)
    assert locked.id == saved.id


async def test_save_existing_updates_quantity(repo):
    saved = await repo.save(_beer())
    saved.quantity = 33
    await repo.save(saved)

    assert (await repo.find_by_id(saved.id)).quantity == 33


async def test_delete_by_id_reports_presence(repo):
    saved = await repo.save(_beer())

    assert await repo.delete_by_id(saved.id) is True
    assert await repo.delete_by_id(saved.id) is False
    assert await repo.find_by_id(saved.id) is None


async def test_find_all_ordered_by_id(repo):
    first = await repo.save(_beer("Brahma"))
    second = await repo.save(_beer("Skol"))

    assert [b.id for b in await repo.find_all()] == [first.id, second.id]


async def test_find_all_empty(repo):
    assert await repo.find_all() == []


async def test_duplicate_insert_maps_to_already_registered(repo):
    await repo.save(_beer())

    with pytest.raises(BeerAlreadyRegisteredError):
        await repo.save(_beer())
    assert len(await repo.find_all()) == 1


async def test_ledger_end_to_end_on_sql_store(repo, beer_create):
    ledger = BeerLedger(repo)
    created = await ledger.register(beer_create)
    beer_id = BeerId(created.id)

    assert (await ledger.increment(beer_id, 10)).quantity == 20
    with pytest.raises(BeerStockExceededError):
        await ledger.increment(beer_id, 31)
    assert (await ledger.find_by_id(beer_id)).quantity == 20
