"""Infrastructure Layer - database engine, external clients, and logging.

Invariants:
    - Infrastructure never imports from api/
    - External failures are mapped to BeaverNetError subclasses (core/errors.py)
"""
