"""Database Metadata - SQLAlchemy declarative Base and shared column mixins.

Invariants:
    - Every ORM model inherits from Base
"""
