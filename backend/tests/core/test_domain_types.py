"""Domain Types — verifies type definitions, enum values and field limits.

Tests:
    - BeerId NewType wraps int
    - BeerType has exactly the nine catalog styles, values equal names
    - LedgerFailure is a closed set of four failure kinds
"""

from beerstock.core.domain_types import (
    BeerId,
    BeerType,
    LedgerFailure,
    StockDirection,
    MAX_CAPACITY,
    MIN_ADJUSTMENT,
    MAX_ADJUSTMENT,
)


def test_beer_id_wraps_int():
    assert BeerId(7) == 7


def test_beer_type_has_nine_styles():
    assert {t.value for t in BeerType} == {
        "LAGER", "PILSEN", "MALTE", "WITBIER", "WEISS",
        "ALE", "IPA", "STOUT", "PORTER",
    }


def test_beer_type_values_equal_names():
    assert all(t.name == t.value for t in BeerType)


def test_beer_type_parses_from_string():
    assert BeerType("IPA") is BeerType.IPA


def test_ledger_failure_has_four_kinds():
    assert set(LedgerFailure) == {
        LedgerFailure.ALREADY_REGISTERED,
        LedgerFailure.NOT_FOUND,
        LedgerFailure.STOCK_EXCEEDED,
        LedgerFailure.STOCK_NEGATIVE,
    }


def test_stock_direction_values():
    assert StockDirection.INCREMENT.value == "increment"
    assert StockDirection.DECREMENT.value == "decrement"


def test_limits():
    assert MAX_CAPACITY == 500
    assert (MIN_ADJUSTMENT, MAX_ADJUSTMENT) == (1, 100)
