from tillbook.domain.ledger.repositories.ledger_transaction_repository import (
    LedgerTransactionRepository,
)

__all__ = ["LedgerTransactionRepository"]
