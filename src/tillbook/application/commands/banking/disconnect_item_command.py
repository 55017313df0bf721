from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tillbook.domain.banking import (
    AggregatorError,
    ItemStatus,
    LinkedItemNotFoundError,
)

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking.ports import BankDataAggregatorPort
    from tillbook.domain.banking.repositories import LinkedItemRepository

logger = logging.getLogger(__name__)


class DisconnectItemCommand:
    """Revoke an item at the aggregator and mark it removed.

    The local removal happens even when the aggregator call fails.
    """

    def __init__(
        self,
        aggregator: BankDataAggregatorPort,
        linked_item_repository: LinkedItemRepository,
    ):
        self._aggregator = aggregator
        self._item_repo = linked_item_repository

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: BankDataAggregatorPort,
    ) -> DisconnectItemCommand:
        return cls(
            aggregator=aggregator,
            linked_item_repository=factory.linked_item_repository(),
        )

    async def execute(self, item_id: str) -> None:
        item = await self._item_repo.find_by_item_id(item_id)
        if item is None or item.status == ItemStatus.REMOVED:
            raise LinkedItemNotFoundError(item_id)

        try:
            await self._aggregator.remove_item(item.access_token)
        except AggregatorError as e:
            logger.error("Aggregator refused removal of item %s: %s", item_id, e.message)

        item.mark_removed()
        await self._item_repo.save(item)
        logger.info("Disconnected item %s", item_id)
