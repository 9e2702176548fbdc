"""Database Package — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - All models inherit from Base (db/base.py)
"""
