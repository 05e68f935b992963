"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or flood output with access logs
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_REQUESTS", "false")
