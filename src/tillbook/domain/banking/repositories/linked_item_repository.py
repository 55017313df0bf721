"""Linked item repository interface (tenant scoped)."""

from abc import ABC, abstractmethod

from tillbook.domain.banking.entities import LinkedItem


class LinkedItemRepository(ABC):
    """Implementations only ever see the current user's items."""

    @abstractmethod
    async def find_by_item_id(self, item_id: str) -> LinkedItem | None:
        """Find an item by aggregator item id."""

    @abstractmethod
    async def find_active(self) -> list[LinkedItem]:
        """Items with status ``active``, oldest first."""

    @abstractmethod
    async def save(self, item: LinkedItem) -> None:
        """Insert or update, keyed by aggregator item id."""
