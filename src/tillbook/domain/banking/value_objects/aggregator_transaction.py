"""Transactions as reported by the aggregator."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from tillbook.domain.banking.value_objects.linked_account import LinkedAccount


class TransactionLocation(BaseModel):
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None

    model_config = ConfigDict(frozen=True)


class AggregatorTransaction(BaseModel):
    """A bank transaction in aggregator terms.

    Positive ``amount`` means money left the account (aggregator sign
    convention); conversion into the ledger drops the sign.
    """

    transaction_id: str
    account_id: str
    amount: Decimal
    date: dt.date
    name: str
    merchant_name: str | None = None
    category: list[str] | None = None
    pending: bool = False
    payment_channel: str | None = None
    iso_currency_code: str | None = Field(default=None, max_length=3)
    location: TransactionLocation | None = None

    model_config = ConfigDict(frozen=True)


class TransactionPage(BaseModel):
    """One offset page of a date-range fetch."""

    transactions: list[AggregatorTransaction] = Field(default_factory=list)
    accounts: list[LinkedAccount] = Field(default_factory=list)
    total_transactions: int = 0

    model_config = ConfigDict(frozen=True)


class TransactionSyncPage(BaseModel):
    """One page of an incremental cursor sync."""

    added: list[AggregatorTransaction] = Field(default_factory=list)
    modified: list[AggregatorTransaction] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)  # transaction ids
    next_cursor: str
    has_more: bool = False

    model_config = ConfigDict(frozen=True)
