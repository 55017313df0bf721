"""Tillbook settings.

Values come from the process environment first, then from a dotenv file:
``TILLBOOK_ENV_FILE`` when set, otherwise ``.env`` in the working directory.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> Path | None:
    explicit = os.environ.get("TILLBOOK_ENV_FILE")
    candidate = Path(explicit) if explicit else Path.cwd() / ".env"
    return candidate if candidate.is_file() else None


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Every tunable of the API, the aggregator and the CLI.

    ``encryption_key`` and ``jwt_secret_key`` have no default, so the
    application refuses to start without them.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    encryption_key: SecretStr  # Fernet
    jwt_secret_key: SecretStr

    app_name: str = "Tillbook"

    # Database. DATABASE_URL wins over the POSTGRES_* components.
    database_url_override: str | None = Field(
        default=None,
        validation_alias="DATABASE_URL",
    )
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "tillbook"

    # HTTP API and refresh-token cookie
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""
    api_cookie_secure: bool = True
    api_cookie_samesite: Literal["lax", "strict", "none"] = "strict"
    api_cookie_domain: str | None = None

    @field_validator(
        "api_cors_origins",
        "team_emails",
        "plaid_products",
        "plaid_country_codes",
        mode="before",
    )
    @classmethod
    def _validate_csv(cls, v: Any) -> str:
        """Store list-valued settings as comma-separated strings."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return str(v) if v else ""

    # JWT
    jwt_access_token_expire_hours: int = 1
    jwt_refresh_token_expire_days: int = 7

    # Registration and access
    registration_mode: Literal["open", "admin_only"] = "open"
    team_email_domain: str = ""
    team_emails: str = ""
    dev_login_enabled: bool = False

    # Plaid
    plaid_client_id: str = ""
    plaid_secret: SecretStr = SecretStr("")
    plaid_env: Literal["sandbox", "development", "production"] = "sandbox"
    plaid_client_name: str = "Tillbook"
    plaid_products: str = "transactions"
    plaid_country_codes: str = "US"
    plaid_language: str = "en"

    # Transaction fetching
    transactions_default_days: int = Field(default=30, ge=1)
    transactions_page_size: int = Field(default=500, ge=1, le=500)

    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Return the explicit database URL or build one from components."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.api_cors_origins)

    @property
    def team_email_list(self) -> list[str]:
        return [email.lower() for email in _split_csv(self.team_emails)]

    @property
    def plaid_product_list(self) -> list[str]:
        return _split_csv(self.plaid_products)

    @property
    def plaid_country_code_list(self) -> list[str]:
        return [code.upper() for code in _split_csv(self.plaid_country_codes)]

    @property
    def plaid_configured(self) -> bool:
        return bool(self.plaid_client_id and self.plaid_secret.get_secret_value())

    @property
    def dev_login_available(self) -> bool:
        """Dev login is only honoured on debug deployments."""
        return self.api_debug and self.dev_login_enabled


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
