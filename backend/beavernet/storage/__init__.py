"""Storage Layer - the Storage interface and its memory and database backends.

Invariants:
    - One interface (storage/base.py), two independent implementations
    - The backend is chosen once at startup (storage/factory.py) and injected
"""
