from tillbook.infrastructure.persistence.sqlalchemy.repositories.ledger.ledger_transaction_repository import (  # NOQA: E501
    LedgerTransactionRepositorySQLAlchemy,
)

__all__ = ["LedgerTransactionRepositorySQLAlchemy"]
