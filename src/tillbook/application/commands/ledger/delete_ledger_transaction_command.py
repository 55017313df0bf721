from __future__ import annotations

from typing import TYPE_CHECKING

from tillbook.domain.ledger import LedgerTransactionNotFoundError

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.ledger import LedgerTransactionRepository


class DeleteLedgerTransactionCommand:
    def __init__(self, ledger_repository: LedgerTransactionRepository):
        self._ledger_repo = ledger_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteLedgerTransactionCommand:
        return cls(ledger_repository=factory.ledger_transaction_repository())

    async def execute(self, transaction_id: str) -> None:
        # Repository is user scoped: other tenants' ids are simply not found
        if not await self._ledger_repo.delete(transaction_id):
            raise LedgerTransactionNotFoundError(transaction_id)
