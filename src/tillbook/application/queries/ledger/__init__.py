from tillbook.application.queries.ledger.list_ledger_transactions_query import (
    ListLedgerTransactionsQuery,
)

__all__ = ["ListLedgerTransactionsQuery"]
