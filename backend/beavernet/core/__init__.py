"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, storage/, infrastructure/, or db/
    - All functions are pure; token generation is the only source of randomness
"""
