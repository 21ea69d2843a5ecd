"""BeaverNet Application Package - municipal multi-service administrative API.

Invariants:
    - Package root has no import side effects beyond the version constant
"""

__version__ = "1.0.0"
