"""Construction of the plaid-python API client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from plaid.api import plaid_api
from plaid.api_client import ApiClient
from plaid.configuration import Configuration

from tillbook_config.settings import Settings

logger = logging.getLogger(__name__)

PLAID_HOSTS = {
    "sandbox": "https://sandbox.plaid.com",
    "development": "https://development.plaid.com",
    "production": "https://production.plaid.com",
}


@dataclass(frozen=True)
class PlaidLinkConfig:
    """Options sent with every link-token request."""

    client_name: str = "Tillbook"
    products: list[str] = field(default_factory=lambda: ["transactions"])
    country_codes: list[str] = field(default_factory=lambda: ["US"])
    language: str = "en"

    @classmethod
    def from_settings(cls, settings: Settings) -> PlaidLinkConfig:
        return cls(
            client_name=settings.plaid_client_name,
            products=settings.plaid_product_list,
            country_codes=settings.plaid_country_code_list,
            language=settings.plaid_language,
        )


def create_plaid_api(settings: Settings) -> plaid_api.PlaidApi | None:
    """Return a PlaidApi for the configured environment, or None without credentials."""
    if not settings.plaid_configured:
        logger.warning("Plaid credentials missing, bank linking is disabled")
        return None

    configuration = Configuration(
        host=PLAID_HOSTS[settings.plaid_env],
        api_key={
            "clientId": settings.plaid_client_id,
            "secret": settings.plaid_secret.get_secret_value(),
        },
    )
    logger.info("Plaid client initialised for %s", settings.plaid_env)
    return plaid_api.PlaidApi(ApiClient(configuration))
