from __future__ import annotations

from typing import TYPE_CHECKING

from tillbook.domain.ledger import LedgerTransactionNotFoundError

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.ledger import LedgerTransaction, LedgerTransactionRepository


class ListLedgerTransactionsQuery:
    """The current user's ledger, newest first."""

    def __init__(self, ledger_repository: LedgerTransactionRepository):
        self._ledger_repo = ledger_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListLedgerTransactionsQuery:
        return cls(ledger_repository=factory.ledger_transaction_repository())

    async def execute(self) -> list[LedgerTransaction]:
        return await self._ledger_repo.find_all()

    async def get(self, transaction_id: str) -> LedgerTransaction:
        transaction = await self._ledger_repo.find_by_id(transaction_id)
        if transaction is None:
            raise LedgerTransactionNotFoundError(transaction_id)
        return transaction
