"""Conversion of aggregator transactions into ledger rows."""

from uuid import UUID

from tillbook.domain.banking.value_objects import AggregatorTransaction
from tillbook.domain.ledger.entities import (
    DEFAULT_CATEGORY,
    LedgerTransaction,
    TransactionSource,
)

AGGREGATOR_CATEGORY_MAP: dict[str, str] = {
    "Food and Drink": "Meals & Entertainment",
    "Travel": "Travel",
    "Shops": "Supplies & Materials",
    "Service": "Services",
    "Transfer": "Transfer",
    "Payment": "Payment",
    "Recreation": "Entertainment",
    "Healthcare": "Health Insurance",
    "Community": "Other Expenses",
    "Bank Fees": "Bank Charges",
    "Interest": "Interest",
    "Tax": "Taxes",
}

LEDGER_ID_PREFIX = "plaid_"


def map_category(categories: list[str] | None) -> str:
    """Map the top-level aggregator category to a bookkeeping category."""
    if not categories:
        return DEFAULT_CATEGORY
    return AGGREGATOR_CATEGORY_MAP.get(categories[0], DEFAULT_CATEGORY)


def build_context(transaction: AggregatorTransaction) -> str:
    path = " > ".join(transaction.category or [])
    return f"{path} | {transaction.payment_channel or ''}"


def ledger_id_for(transaction_id: str) -> str:
    return f"{LEDGER_ID_PREFIX}{transaction_id}"


def convert_aggregator_transaction(
    transaction: AggregatorTransaction,
    user_id: UUID,
) -> LedgerTransaction:
    """Turn a bank transaction into a verified ledger expense.

    Parameters
    ----------
    transaction
        Transaction as reported by the aggregator
    user_id
        Owner of the resulting ledger row

    Returns
    -------
    A ledger transaction with id ``plaid_<transaction_id>`` and the
    absolute amount
    """
    return LedgerTransaction(
        id=ledger_id_for(transaction.transaction_id),
        user_id=user_id,
        date=transaction.date,
        vendor=transaction.merchant_name or transaction.name or "Unknown",
        amount=abs(transaction.amount),
        category=map_category(transaction.category),
        context=build_context(transaction),
        bank_verified=True,
        bank_id=transaction.transaction_id,
        source=TransactionSource.PLAID,
    )
