"""Pytest fixtures for API integration tests.

Every test gets a fresh in-memory SQLite database and an in-memory
aggregator. The client is entered as a context manager so all requests,
and the table setup, run on one event loop.
"""

import pytest
from cryptography.fernet import Fernet
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tests.shared.fixtures import FakeAggregator, TestBankFactory
from tillbook.infrastructure.persistence.sqlalchemy import create_tables
from tillbook.presentation.api.app import API_V1_PREFIX, create_app
from tillbook.presentation.api.config import get_api_settings
from tillbook.presentation.api.dependencies import (
    get_bank_aggregator,
    get_db_session,
    get_password_service,
)
from tillbook_auth import PasswordHashingService
from tillbook_config.settings import Settings

TEST_ENCRYPTION_KEY = Fernet.generate_key()
TEST_PASSWORD = "SecurePassword123!"  # NOQA: S105

ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "owner@example.com"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        encryption_key=SecretStr(TEST_ENCRYPTION_KEY.decode()),
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        api_cookie_secure=False,  # Allow HTTP in tests
        registration_mode="open",
        team_email_domain="",
        team_emails="",
        dev_login_enabled=False,
        transactions_page_size=2,
    )


@pytest.fixture
def fake_aggregator() -> FakeAggregator:
    return FakeAggregator()


@pytest.fixture
def test_client(api_settings, fake_aggregator):
    """Create a test client backed by an in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app = create_app(settings=api_settings)
    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_bank_aggregator] = lambda: fake_aggregator
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )

    with TestClient(app) as client:
        client.portal.call(create_tables, engine)
        yield client
        client.portal.call(engine.dispose)


def _register(client: TestClient, email: str) -> dict:
    response = client.post(
        f"{API_V1_PREFIX}/auth/register",
        json={"email": email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(test_client) -> dict:
    """The first account on a fresh database is the admin."""
    return _register(test_client, ADMIN_EMAIL)


@pytest.fixture
def user_headers(test_client, admin_headers) -> dict:
    """A regular user who has not completed onboarding."""
    return _register(test_client, USER_EMAIL)


@pytest.fixture
def onboarded_headers(test_client, user_headers, api_v1_prefix) -> dict:
    response = test_client.post(
        f"{api_v1_prefix}/onboarding/complete",
        json={"company_name": "Acme LLC"},
        headers=user_headers,
    )
    assert response.status_code == 200, response.text
    return user_headers


@pytest.fixture
def linked_item(test_client, user_headers, fake_aggregator, api_v1_prefix):
    """Connect ``item-1`` for the regular user through the exchange endpoint."""
    item = fake_aggregator.add_item(
        "public-sandbox-1",
        "item-1",
        accounts=[TestBankFactory.account()],
        institution=TestBankFactory.institution(),
    )
    response = test_client.post(
        f"{api_v1_prefix}/plaid/exchange-token",
        json={"public_token": "public-sandbox-1"},
        headers=user_headers,
    )
    assert response.status_code == 200, response.text
    return item
