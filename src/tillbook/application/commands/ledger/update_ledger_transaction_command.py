from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tillbook.domain.ledger import LedgerTransactionNotFoundError

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.ledger import LedgerTransaction, LedgerTransactionRepository


class UpdateLedgerTransactionCommand:
    """Partial update of one of the current user's transactions."""

    def __init__(self, ledger_repository: LedgerTransactionRepository):
        self._ledger_repo = ledger_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateLedgerTransactionCommand:
        return cls(ledger_repository=factory.ledger_transaction_repository())

    async def execute(self, transaction_id: str, **changes: Any) -> LedgerTransaction:
        transaction = await self._ledger_repo.find_by_id(transaction_id)
        if transaction is None:
            raise LedgerTransactionNotFoundError(transaction_id)

        transaction.update(**changes)
        await self._ledger_repo.save(transaction)
        return transaction
