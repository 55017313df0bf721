"""Plaid implementation of BankDataAggregatorPort.

The adapter is the only place that knows about plaid-python. SDK calls are
blocking, so each one runs in a worker thread; SDK exceptions are turned
into banking domain exceptions before they leave this module.
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import date
from typing import Any, Callable
from uuid import UUID

import urllib3
from plaid.api import plaid_api
from plaid.exceptions import ApiException, OpenApiException
from plaid.model.accounts_get_request import AccountsGetRequest
from plaid.model.country_code import CountryCode
from plaid.model.credit_account_subtype import CreditAccountSubtype
from plaid.model.credit_account_subtypes import CreditAccountSubtypes
from plaid.model.credit_filter import CreditFilter
from plaid.model.depository_account_subtype import DepositoryAccountSubtype
from plaid.model.depository_account_subtypes import DepositoryAccountSubtypes
from plaid.model.depository_filter import DepositoryFilter
from plaid.model.institutions_get_by_id_request import InstitutionsGetByIdRequest
from plaid.model.item_public_token_exchange_request import (
    ItemPublicTokenExchangeRequest,
)
from plaid.model.item_remove_request import ItemRemoveRequest
from plaid.model.link_token_account_filters import LinkTokenAccountFilters
from plaid.model.link_token_create_request import LinkTokenCreateRequest
from plaid.model.link_token_create_request_user import LinkTokenCreateRequestUser
from plaid.model.products import Products
from plaid.model.transactions_get_request import TransactionsGetRequest
from plaid.model.transactions_get_request_options import TransactionsGetRequestOptions
from plaid.model.transactions_sync_request import TransactionsSyncRequest

from tillbook.domain.banking.exceptions import (
    AggregatorError,
    AggregatorNotConfiguredError,
    AggregatorRequestError,
    ItemLoginRequiredError,
)
from tillbook.domain.banking.ports import BankDataAggregatorPort
from tillbook.domain.banking.value_objects import (
    Institution,
    ItemAccounts,
    LinkToken,
    TokenExchange,
    TransactionPage,
    TransactionSyncPage,
)
from tillbook.infrastructure.plaid.client import PlaidLinkConfig
from tillbook.infrastructure.plaid.mappers import (
    to_aggregator_transaction,
    to_institution,
    to_linked_account,
)

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_CODES = frozenset({"ITEM_LOGIN_REQUIRED", "PENDING_EXPIRATION"})
INSTITUTION_MISSING_CODES = frozenset({"INSTITUTION_NOT_FOUND", "INVALID_INSTITUTION"})

DEPOSITORY_SUBTYPES = ("checking", "savings")
CREDIT_SUBTYPES = ("credit card",)


def _parse_error_body(error: ApiException) -> dict[str, Any]:
    body = getattr(error, "body", None)
    if isinstance(body, (str, bytes)):
        try:
            parsed = json.loads(body)
        except ValueError:
            return {}
        return parsed if isinstance(parsed, dict) else {}
    return {}


def translate_api_exception(error: ApiException) -> AggregatorError:
    """Map a Plaid API error to the matching domain exception."""
    details = _parse_error_body(error)
    error_code = details.get("error_code")
    message = (
        details.get("display_message")
        or details.get("error_message")
        or f"Plaid request failed with status {getattr(error, 'status', '?')}"
    )
    if error_code in LOGIN_REQUIRED_CODES:
        return ItemLoginRequiredError()
    return AggregatorRequestError(
        message,
        error_code=error_code,
        error_type=details.get("error_type"),
    )


class PlaidAggregatorAdapter(BankDataAggregatorPort):
    """
    Bank data through Plaid.

    Parameters
    ----------
    api
        A configured ``PlaidApi``; None when credentials are missing, in
        which case every call raises ``AggregatorNotConfiguredError``.
    link_config
        Client name, products, countries and language for link tokens.
    """

    def __init__(
        self,
        api: plaid_api.PlaidApi | None,
        link_config: PlaidLinkConfig | None = None,
    ):
        self._api = api
        self._link_config = link_config or PlaidLinkConfig()

    @property
    def is_configured(self) -> bool:
        return self._api is not None

    async def create_link_token(self, client_user_id: UUID) -> LinkToken:
        config = self._link_config
        request = LinkTokenCreateRequest(
            user=LinkTokenCreateRequestUser(client_user_id=str(client_user_id)),
            client_name=config.client_name,
            products=[Products(p) for p in config.products],
            country_codes=[CountryCode(c) for c in config.country_codes],
            language=config.language,
            account_filters=LinkTokenAccountFilters(
                depository=DepositoryFilter(
                    account_subtypes=DepositoryAccountSubtypes(
                        [DepositoryAccountSubtype(s) for s in DEPOSITORY_SUBTYPES],
                    ),
                ),
                credit=CreditFilter(
                    account_subtypes=CreditAccountSubtypes(
                        [CreditAccountSubtype(s) for s in CREDIT_SUBTYPES],
                    ),
                ),
            ),
        )
        response = await self._call("link_token_create", request)
        return LinkToken(link_token=response.link_token, expiration=response.expiration)

    async def exchange_public_token(self, public_token: str) -> TokenExchange:
        request = ItemPublicTokenExchangeRequest(public_token=public_token)
        response = await self._call("item_public_token_exchange", request)
        logger.info("Exchanged public token for item %s", response.item_id)
        return TokenExchange(item_id=response.item_id, access_token=response.access_token)

    async def get_accounts(self, access_token: str) -> ItemAccounts:
        response = await self._call(
            "accounts_get",
            AccountsGetRequest(access_token=access_token),
        )
        item = getattr(response, "item", None)
        return ItemAccounts(
            institution_id=getattr(item, "institution_id", None),
            accounts=[to_linked_account(a) for a in response.accounts],
        )

    async def get_institution(self, institution_id: str) -> Institution | None:
        request = InstitutionsGetByIdRequest(
            institution_id=institution_id,
            country_codes=[CountryCode(c) for c in self._link_config.country_codes],
        )
        try:
            response = await self._call("institutions_get_by_id", request)
        except AggregatorRequestError as e:
            if e.error_code in INSTITUTION_MISSING_CODES:
                return None
            raise
        return to_institution(response.institution)

    async def get_transactions(
        self,
        access_token: str,
        start_date: date,
        end_date: date,
        count: int,
        offset: int = 0,
    ) -> TransactionPage:
        request = TransactionsGetRequest(
            access_token=access_token,
            start_date=start_date,
            end_date=end_date,
            options=TransactionsGetRequestOptions(count=count, offset=offset),
        )
        response = await self._call("transactions_get", request)
        return TransactionPage(
            transactions=[to_aggregator_transaction(t) for t in response.transactions],
            accounts=[to_linked_account(a) for a in response.accounts],
            total_transactions=int(response.total_transactions),
        )

    async def sync_transactions(
        self,
        access_token: str,
        cursor: str | None,
        count: int,
    ) -> TransactionSyncPage:
        kwargs: dict[str, Any] = {"access_token": access_token, "count": count}
        if cursor:
            kwargs["cursor"] = cursor
        response = await self._call("transactions_sync", TransactionsSyncRequest(**kwargs))
        return TransactionSyncPage(
            added=[to_aggregator_transaction(t) for t in response.added],
            modified=[to_aggregator_transaction(t) for t in response.modified],
            removed=[r.transaction_id for r in response.removed],
            next_cursor=response.next_cursor,
            has_more=bool(response.has_more),
        )

    async def remove_item(self, access_token: str) -> None:
        await self._call("item_remove", ItemRemoveRequest(access_token=access_token))

    async def _call(self, operation: str, request: Any) -> Any:
        if self._api is None:
            raise AggregatorNotConfiguredError
        method: Callable[[Any], Any] = getattr(self._api, operation)
        try:
            return await asyncio.to_thread(method, request)
        except ApiException as e:
            error = translate_api_exception(e)
            logger.warning(
                "Plaid %s failed: %s (%s)",
                operation,
                error.message,
                getattr(error, "error_code", None),
            )
            raise error from e
        except (OpenApiException, urllib3.exceptions.HTTPError) as e:
            logger.error("Plaid %s failed: %s", operation, e)
            raise AggregatorError(f"Bank aggregator unavailable: {e}") from e
