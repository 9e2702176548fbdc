"""Beer ORM — persists one catalog entry and its current stock.

Invariants:
    - id is an autoincrement integer assigned on insert, never reassigned
    - name is unique (exact, case-sensitive) — backs the ledger's registration check
    - quantity is mutated only by the ledger's increment/decrement
    - max is fixed at registration

Design Decisions:
    - type stored as VARCHAR (native_enum=False): adding a style needs no ALTER TYPE
    - CHECK constraints keep quantity and max non-negative even for writes
      that bypass the ledger
"""

from sqlalchemy import CheckConstraint, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from beerstock.core.domain_types import BeerType, NAME_MAX_LENGTH, BRAND_MAX_LENGTH
from beerstock.db.base import Base


class Beer(Base):
    """Beer catalog entry with bounded stock."""
    __tablename__ = "beers"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_beers_quantity_non_negative"),
        CheckConstraint("max >= 0", name="ck_beers_max_non_negative"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False, unique=True,
    )
    brand: Mapped[str] = mapped_column(
        String(BRAND_MAX_LENGTH), nullable=False,
    )
    type: Mapped[BeerType] = mapped_column(
        Enum(BeerType, native_enum=False, length=20), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"Beer(id={self.id!r}, name={self.name!r}, "
            f"quantity={self.quantity!r}, max={self.max!r})"
        )
