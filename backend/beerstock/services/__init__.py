"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services read state through repository protocols, decide via core/, then write
    - Services raise core/errors.py types only; HTTP mapping happens in api/
"""
