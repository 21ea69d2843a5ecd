"""Root conftest - shared test configuration."""

import os

# Tests never reach PayPal or a real database, and start with no sample data
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("PAYPAL_CLIENT_ID", "")
os.environ.setdefault("PAYPAL_CLIENT_SECRET", "")
os.environ.setdefault("LOG_FORMAT", "text")
