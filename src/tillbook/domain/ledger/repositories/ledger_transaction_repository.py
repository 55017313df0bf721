"""Ledger transaction repository interface (tenant scoped)."""

from abc import ABC, abstractmethod

from tillbook.domain.ledger.entities import LedgerTransaction


class LedgerTransactionRepository(ABC):
    @abstractmethod
    async def find_all(self) -> list[LedgerTransaction]:
        """All of the current user's transactions, newest date first."""

    @abstractmethod
    async def find_by_id(self, transaction_id: str) -> LedgerTransaction | None:
        """None for unknown ids and for other tenants' rows."""

    @abstractmethod
    async def find_by_bank_id(self, bank_id: str) -> LedgerTransaction | None:
        """Find the row imported from aggregator transaction ``bank_id``."""

    @abstractmethod
    async def save(self, transaction: LedgerTransaction) -> None:
        """Insert or update."""

    @abstractmethod
    async def delete(self, transaction_id: str) -> bool:
        """Returns False when nothing was deleted."""

    @abstractmethod
    async def delete_by_bank_id(self, bank_id: str) -> bool:
        """Delete the row imported from aggregator transaction ``bank_id``."""

    @abstractmethod
    async def count(self) -> int:
        """Number of the current user's transactions."""
