"""Beer Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - BeerCreate.name / brand: 1-200 chars, stored exactly as sent, not whitespace-only
    - BeerCreate.max: 0-500; BeerCreate.quantity: 0-100
    - QuantityAdjustment.quantity: 1-100 (zero is rejected)
    - BeerResponse is built straight from ORM attributes (from_attributes)

Design Decisions:
    - No cross-field check of quantity <= max here: that rule belongs to the
      ledger (and is optional at registration, see Settings)
    - Names are never normalized: uniqueness and lookup are exact-match
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from beerstock.core.domain_types import (
    BeerType,
    NAME_MAX_LENGTH,
    BRAND_MAX_LENGTH,
    MAX_CAPACITY,
    MAX_INITIAL_QUANTITY,
    MIN_ADJUSTMENT,
    MAX_ADJUSTMENT,
)


class BeerCreate(BaseModel):
    """Beer registration — every field required."""
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    brand: str = Field(min_length=1, max_length=BRAND_MAX_LENGTH)
    max: int = Field(ge=0, le=MAX_CAPACITY)
    quantity: int = Field(ge=0, le=MAX_INITIAL_QUANTITY)
    type: BeerType

    @field_validator("name", "brand")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v


class BeerResponse(BaseModel):
    """Beer response — public-facing beer data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType


class QuantityAdjustment(BaseModel):
    """Body of increment/decrement requests."""
    quantity: int = Field(ge=MIN_ADJUSTMENT, le=MAX_ADJUSTMENT)
