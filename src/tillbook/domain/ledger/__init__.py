"""Ledger domain: a tenant's expense transactions."""

from tillbook.domain.ledger.entities import (
    DEFAULT_CATEGORY,
    LedgerTransaction,
    TransactionSource,
)
from tillbook.domain.ledger.exceptions import (
    DuplicateBankTransactionError,
    LedgerTransactionNotFoundError,
)
from tillbook.domain.ledger.repositories import LedgerTransactionRepository
from tillbook.domain.ledger.services import (
    convert_aggregator_transaction,
    map_category,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "DuplicateBankTransactionError",
    "LedgerTransaction",
    "LedgerTransactionNotFoundError",
    "LedgerTransactionRepository",
    "TransactionSource",
    "convert_aggregator_transaction",
    "map_category",
]
