"""Schemas for the bank linking and live transaction endpoints."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from tillbook.domain.banking.value_objects import (
    AccountBalances,
    AggregatorTransaction,
    Institution,
    LinkedAccount,
    TransactionLocation,
)


class LinkTokenResponse(BaseModel):
    link_token: str
    expiration: dt.datetime | None = None


class ExchangeTokenRequest(BaseModel):
    public_token: str = Field(..., min_length=1)


class AccountResponse(BaseModel):
    account_id: str
    name: str
    official_name: str | None = None
    mask: str | None = None
    type: str | None = None
    subtype: str | None = None
    balances: AccountBalances | None = None
    institution_name: str | None = None

    @classmethod
    def from_account(
        cls,
        account: LinkedAccount,
        institution_name: str | None = None,
    ) -> "AccountResponse":
        return cls(
            account_id=account.account_id,
            name=account.name,
            official_name=account.official_name,
            mask=account.mask,
            type=account.type,
            subtype=account.subtype,
            balances=account.balances,
            institution_name=institution_name,
        )


class ExchangeTokenResponse(BaseModel):
    success: bool = True
    item_id: str
    accounts: list[AccountResponse]
    institution: Institution | None = None


class InstitutionRef(BaseModel):
    name: str
    institution_id: str | None = None


class AccountsResponse(BaseModel):
    accounts: list[AccountResponse]
    institutions: list[InstitutionRef]


class TransactionResponse(BaseModel):
    transaction_id: str
    account_id: str
    amount: Decimal
    date: dt.date
    name: str
    merchant_name: str | None = None
    category: list[str] = Field(default_factory=list)
    pending: bool = False
    payment_channel: str | None = None
    iso_currency_code: str | None = None
    location: TransactionLocation | None = None

    @classmethod
    def from_transaction(cls, tx: AggregatorTransaction) -> "TransactionResponse":
        return cls(
            transaction_id=tx.transaction_id,
            account_id=tx.account_id,
            amount=tx.amount,
            date=tx.date,
            name=tx.name,
            merchant_name=tx.merchant_name,
            category=list(tx.category or []),
            pending=tx.pending,
            payment_channel=tx.payment_channel,
            iso_currency_code=tx.iso_currency_code,
            location=tx.location,
        )


class TransactionsResponse(BaseModel):
    transactions: list[TransactionResponse]
    accounts: list[AccountResponse]
    total_transactions: int
    start_date: dt.date
    end_date: dt.date


class SyncErrorResponse(BaseModel):
    item_id: str
    institution_name: str | None = None
    error_code: str
    message: str


class SyncResponse(BaseModel):
    added: list[TransactionResponse]
    modified: list[TransactionResponse]
    removed: list[str]
    items_synced: int
    errors: list[SyncErrorResponse]


class DisconnectRequest(BaseModel):
    item_id: str = Field(..., min_length=1)


class DisconnectResponse(BaseModel):
    success: bool = True
    item_id: str
