"""Pydantic Schemas - request validation for every write endpoint.

Invariants:
    - Schemas validate at the system boundary; storage receives validated dicts
    - Wire format is camelCase, Python attributes are snake_case
"""
