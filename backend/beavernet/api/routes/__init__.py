"""Route Modules - one file per service area.

Invariants:
    - Each module defines its own APIRouter with prefix, tags, and access guard
    - Routes hold no business rules: planning lives in core/, IO in storage/
"""
