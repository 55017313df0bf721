from tillbook.domain.ledger.entities.ledger_transaction import (
    DEFAULT_CATEGORY,
    LedgerTransaction,
    TransactionSource,
)

__all__ = ["DEFAULT_CATEGORY", "LedgerTransaction", "TransactionSource"]
