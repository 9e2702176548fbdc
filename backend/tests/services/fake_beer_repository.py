"""In-Memory Beer Repository — stands in for the SQL store in ledger unit tests.

Invariants:
    - Stores copies: mutating a returned Beer never changes stored state until save()
    - Ids assigned sequentially from 1 on insert
    - Every call recorded in `calls` so tests can assert "no write happened"

Design Decisions:
    - Structural match of BeerRepository (no inheritance): Protocol typing is enough
"""

from beerstock.models.beer import Beer


def _copy(beer: Beer) -> Beer:
    return Beer(
        id=beer.id, name=beer.name, brand=beer.brand, type=beer.type,
        quantity=beer.quantity, max=beer.max,
    )


class InMemoryBeerRepository:
    """Dict-backed BeerRepository."""

    def __init__(self):
        self._rows: dict[int, Beer] = {}
        self._next_id = 1
        self.calls: list[str] = []

    @property
    def writes(self) -> list[str]:
        return [c for c in self.calls if c in ("save", "delete_by_id")]

    async def find_by_name(self, name: str) -> Beer | None:
        self.calls.append("find_by_name")
        for row in self._rows.values():
            if row.name == name:
                return _copy(row)
        return None

    async def find_by_id(self, beer_id: int, *, for_update: bool = False) -> Beer | None:
        self.calls.append("find_by_id")
        row = self._rows.get(beer_id)
        return _copy(row) if row else None

    async def save(self, beer: Beer) -> Beer:
        self.calls.append("save")
        if beer.id is None:
            beer.id = self._next_id
            self._next_id += 1
        self._rows[beer.id] = _copy(beer)
        return _copy(beer)

    async def delete_by_id(self, beer_id: int) -> bool:
        self.calls.append("delete_by_id")
        return self._rows.pop(beer_id, None) is not None

    async def find_all(self) -> list[Beer]:
        self.calls.append("find_all")
        return [_copy(self._rows[k]) for k in sorted(self._rows)]
