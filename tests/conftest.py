"""Root pytest configuration.

The API module builds its application at import time, so the required
secrets are put into the environment before anything from tillbook is
imported. Values already set in the environment win.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests with mocked ports
    ├── integration/api/   # HTTP tests against in-memory SQLite
    └── shared/            # Shared fixtures and fakes
"""

import os

from cryptography.fernet import Fernet

os.environ.setdefault("ENCRYPTION_KEY", Fernet.generate_key().decode("ascii"))
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key-for-tillbook")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # NOQA: E402

from tillbook_config.settings import clear_settings_cache  # NOQA: E402


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start every session from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
