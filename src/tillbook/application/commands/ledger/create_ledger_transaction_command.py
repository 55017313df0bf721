from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from tillbook.domain.ledger import (
    DEFAULT_CATEGORY,
    DuplicateBankTransactionError,
    LedgerTransaction,
    TransactionSource,
)

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.ledger import LedgerTransactionRepository


class CreateLedgerTransactionCommand:
    """Record a transaction entered by hand."""

    def __init__(
        self,
        ledger_repository: LedgerTransactionRepository,
        user_context: UserContext,
    ):
        self._ledger_repo = ledger_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateLedgerTransactionCommand:
        return cls(
            ledger_repository=factory.ledger_transaction_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        date: date,
        vendor: str,
        amount: Decimal,
        category: str = DEFAULT_CATEGORY,
        context: str | None = None,
        made_by: str | None = None,
        bank_verified: bool = False,
        bank_id: str | None = None,
    ) -> LedgerTransaction:
        if bank_id and await self._ledger_repo.find_by_bank_id(bank_id):
            raise DuplicateBankTransactionError(bank_id)

        transaction = LedgerTransaction(
            user_id=self._user_context.user_id,
            date=date,
            vendor=vendor,
            amount=amount,
            category=category,
            context=context,
            made_by=made_by,
            bank_verified=bank_verified,
            bank_id=bank_id,
            source=TransactionSource.MANUAL,
        )
        await self._ledger_repo.save(transaction)
        return transaction
