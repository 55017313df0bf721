"""Unit tests for the Plaid adapter with a mocked PlaidApi."""

import json
from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from plaid.exceptions import ApiException

from tillbook.domain.banking import (
    AggregatorNotConfiguredError,
    AggregatorRequestError,
    ItemLoginRequiredError,
)
from tillbook.infrastructure.plaid import PlaidAggregatorAdapter, PlaidLinkConfig
from tillbook.infrastructure.plaid.plaid_adapter import translate_api_exception

USER_ID = UUID("12345678-1234-5678-1234-567812345678")


def _api_exception(status: int, **body) -> ApiException:
    error = ApiException(status=status, reason="Bad Request")
    error.body = json.dumps(body)
    return error


def _plaid_account(account_id="acc-1"):
    return SimpleNamespace(
        account_id=account_id,
        name="Plaid Checking",
        official_name=None,
        mask="0000",
        type="depository",
        subtype="checking",
        balances=SimpleNamespace(
            available=100.5,
            current=110.0,
            limit=None,
            iso_currency_code="USD",
        ),
    )


def _plaid_transaction(transaction_id="tx-1"):
    return SimpleNamespace(
        transaction_id=transaction_id,
        account_id="acc-1",
        amount=12.5,
        date=date(2024, 3, 1),
        name="Uber 063015 SF**POOL**",
        merchant_name="Uber",
        category=["Travel", "Taxi"],
        pending=False,
        payment_channel="online",
        iso_currency_code="USD",
        location=SimpleNamespace(city="San Francisco", region="CA"),
    )


class TestTranslateApiException:
    def test_login_required(self):
        error = translate_api_exception(
            _api_exception(400, error_code="ITEM_LOGIN_REQUIRED", error_type="ITEM_ERROR"),
        )

        assert isinstance(error, ItemLoginRequiredError)

    def test_request_error_keeps_plaid_code(self):
        error = translate_api_exception(
            _api_exception(
                400,
                error_code="INVALID_PUBLIC_TOKEN",
                error_type="INVALID_INPUT",
                error_message="provided public token is in an invalid format",
            ),
        )

        assert isinstance(error, AggregatorRequestError)
        assert error.error_code == "INVALID_PUBLIC_TOKEN"
        assert error.error_type == "INVALID_INPUT"
        assert "invalid format" in error.message

    def test_unparseable_body(self):
        exc = ApiException(status=500, reason="Server Error")
        exc.body = "<html>oops</html>"

        error = translate_api_exception(exc)

        assert error.error_code is None
        assert "500" in error.message


class TestPlaidAggregatorAdapter:
    def setup_method(self):
        self.api = MagicMock()
        self.adapter = PlaidAggregatorAdapter(
            self.api,
            PlaidLinkConfig(client_name="Tillbook Test", country_codes=["US", "CA"]),
        )

    @pytest.mark.asyncio
    async def test_not_configured(self):
        adapter = PlaidAggregatorAdapter(api=None)

        assert not adapter.is_configured
        with pytest.raises(AggregatorNotConfiguredError):
            await adapter.create_link_token(USER_ID)

    @pytest.mark.asyncio
    async def test_create_link_token(self):
        expiration = datetime(2024, 3, 1, 16, tzinfo=timezone.utc)
        self.api.link_token_create.return_value = SimpleNamespace(
            link_token="link-sandbox-abc",
            expiration=expiration,
        )

        token = await self.adapter.create_link_token(USER_ID)

        assert token.link_token == "link-sandbox-abc"
        assert token.expiration == expiration
        request = self.api.link_token_create.call_args.args[0]
        assert request.user.client_user_id == str(USER_ID)
        assert request.client_name == "Tillbook Test"
        assert [c.value for c in request.country_codes] == ["US", "CA"]
        depository = request.account_filters.depository.account_subtypes.value
        assert [s.value for s in depository] == ["checking", "savings"]
        credit = request.account_filters.credit.account_subtypes.value
        assert [s.value for s in credit] == ["credit card"]

    @pytest.mark.asyncio
    async def test_exchange_public_token(self):
        self.api.item_public_token_exchange.return_value = SimpleNamespace(
            item_id="item-1",
            access_token="access-sandbox-1",
        )

        exchange = await self.adapter.exchange_public_token("public-sandbox-1")

        assert exchange.item_id == "item-1"
        assert exchange.access_token == "access-sandbox-1"
        assert "access-sandbox-1" not in repr(exchange)

    @pytest.mark.asyncio
    async def test_get_accounts_maps_balances(self):
        self.api.accounts_get.return_value = SimpleNamespace(
            item=SimpleNamespace(institution_id="ins_109508"),
            accounts=[_plaid_account()],
        )

        result = await self.adapter.get_accounts("access-sandbox-1")

        assert result.institution_id == "ins_109508"
        account = result.accounts[0]
        assert account.type == "depository"
        assert account.balances.available == Decimal("100.5")
        assert account.balances.limit is None

    @pytest.mark.asyncio
    async def test_get_transactions_passes_paging(self):
        self.api.transactions_get.return_value = SimpleNamespace(
            transactions=[_plaid_transaction()],
            accounts=[_plaid_account()],
            total_transactions=7,
        )

        page = await self.adapter.get_transactions(
            "access-sandbox-1",
            date(2024, 3, 1),
            date(2024, 3, 31),
            count=500,
            offset=100,
        )

        request = self.api.transactions_get.call_args.args[0]
        assert request.options.count == 500
        assert request.options.offset == 100
        assert page.total_transactions == 7
        transaction = page.transactions[0]
        assert transaction.amount == Decimal("12.5")
        assert transaction.location.city == "San Francisco"

    @pytest.mark.asyncio
    async def test_sync_transactions(self):
        self.api.transactions_sync.return_value = SimpleNamespace(
            added=[_plaid_transaction("tx-1")],
            modified=[],
            removed=[SimpleNamespace(transaction_id="tx-0")],
            next_cursor="cursor-1",
            has_more=False,
        )

        page = await self.adapter.sync_transactions("access-sandbox-1", None, 100)

        request = self.api.transactions_sync.call_args.args[0]
        assert "cursor" not in request.to_dict()
        assert [t.transaction_id for t in page.added] == ["tx-1"]
        assert page.removed == ["tx-0"]
        assert page.next_cursor == "cursor-1"

    @pytest.mark.asyncio
    async def test_unknown_institution_returns_none(self):
        self.api.institutions_get_by_id.side_effect = _api_exception(
            400,
            error_code="INVALID_INSTITUTION",
            error_type="INVALID_INPUT",
        )

        assert await self.adapter.get_institution("ins_0") is None

    @pytest.mark.asyncio
    async def test_api_errors_are_translated(self):
        self.api.accounts_get.side_effect = _api_exception(
            400,
            error_code="ITEM_LOGIN_REQUIRED",
            error_type="ITEM_ERROR",
        )

        with pytest.raises(ItemLoginRequiredError):
            await self.adapter.get_accounts("access-sandbox-1")
