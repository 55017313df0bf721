from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tillbook.domain.banking.value_objects import LinkToken

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking.ports import BankDataAggregatorPort

logger = logging.getLogger(__name__)


class CreateLinkTokenCommand:
    """Start the browser-side bank linking flow for the current user."""

    def __init__(self, aggregator: BankDataAggregatorPort, user_context: UserContext):
        self._aggregator = aggregator
        self._user_context = user_context

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: BankDataAggregatorPort,
    ) -> CreateLinkTokenCommand:
        return cls(aggregator=aggregator, user_context=factory.user_context)

    async def execute(self) -> LinkToken:
        token = await self._aggregator.create_link_token(self._user_context.user_id)
        logger.info("Link token created for user %s", self._user_context.user_id)
        return token
