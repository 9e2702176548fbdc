"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Beer is the only entity; it owns its stock quantity

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is populated before create_all
"""

from beerstock.models.beer import Beer  # noqa: F401
