"""Translate plaid-python response models into banking value objects."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from tillbook.domain.banking.value_objects import (
    AccountBalances,
    AggregatorTransaction,
    Institution,
    LinkedAccount,
    TransactionLocation,
)


def _opt(obj: Any, name: str) -> Any:
    # SDK models raise AttributeError for optional fields that were omitted
    return getattr(obj, name, None)


def _enum_value(value: Any) -> str | None:
    if value is None:
        return None
    return str(value.value) if hasattr(value, "value") else str(value)


def _decimal(value: Any) -> Decimal | None:
    return None if value is None else Decimal(str(value))


def to_linked_account(account: Any) -> LinkedAccount:
    balances = _opt(account, "balances")
    return LinkedAccount(
        account_id=account.account_id,
        name=account.name,
        official_name=_opt(account, "official_name"),
        mask=_opt(account, "mask"),
        type=_enum_value(account.type) or "other",
        subtype=_enum_value(_opt(account, "subtype")),
        balances=(
            AccountBalances(
                available=_decimal(_opt(balances, "available")),
                current=_decimal(_opt(balances, "current")),
                limit=_decimal(_opt(balances, "limit")),
                iso_currency_code=_opt(balances, "iso_currency_code"),
            )
            if balances is not None
            else None
        ),
    )


def to_location(location: Any) -> TransactionLocation | None:
    if location is None:
        return None
    return TransactionLocation(
        address=_opt(location, "address"),
        city=_opt(location, "city"),
        region=_opt(location, "region"),
        postal_code=_opt(location, "postal_code"),
        country=_opt(location, "country"),
    )


def to_aggregator_transaction(transaction: Any) -> AggregatorTransaction:
    category = _opt(transaction, "category")
    return AggregatorTransaction(
        transaction_id=transaction.transaction_id,
        account_id=transaction.account_id,
        amount=Decimal(str(transaction.amount)),
        date=transaction.date,
        name=_opt(transaction, "name") or _opt(transaction, "merchant_name") or "",
        merchant_name=_opt(transaction, "merchant_name"),
        category=list(category) if category else None,
        pending=bool(_opt(transaction, "pending")),
        payment_channel=_enum_value(_opt(transaction, "payment_channel")),
        iso_currency_code=_opt(transaction, "iso_currency_code"),
        location=to_location(_opt(transaction, "location")),
    )


def to_institution(institution: Any) -> Institution:
    return Institution(
        institution_id=institution.institution_id,
        name=institution.name,
        logo=_opt(institution, "logo"),
        primary_color=_opt(institution, "primary_color"),
        url=_opt(institution, "url"),
    )
