"""Root conftest — shared test configuration."""

import os

# Settings are cached on first import of app.config; set env before that happens
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault(
    "JWT_SECRET", "test-secret-key-that-is-at-least-32-bytes-long",
)
os.environ.setdefault("API_COMPAT_MODE", "legacy")
os.environ.setdefault("LOG_FORMAT", "text")
