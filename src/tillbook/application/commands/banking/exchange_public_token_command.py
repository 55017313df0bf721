"""Finish bank linking: store the item behind a public token."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tillbook.domain.banking import AggregatorError, LinkedItem
from tillbook.domain.banking.value_objects import Institution, LinkedAccount

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking.ports import BankDataAggregatorPort
    from tillbook.domain.banking.repositories import LinkedItemRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeResult:
    item_id: str
    accounts: list[LinkedAccount]  # with balances
    institution: Institution | None


class ExchangePublicTokenCommand:
    """
    Exchange the public token, read the item's accounts, and upsert the
    linked item for the current user.

    The institution lookup is best effort: if it fails the item is stored
    without institution details.
    """

    def __init__(
        self,
        aggregator: BankDataAggregatorPort,
        linked_item_repository: LinkedItemRepository,
        user_context: UserContext,
    ):
        self._aggregator = aggregator
        self._item_repo = linked_item_repository
        self._user_context = user_context

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: BankDataAggregatorPort,
    ) -> ExchangePublicTokenCommand:
        return cls(
            aggregator=aggregator,
            linked_item_repository=factory.linked_item_repository(),
            user_context=factory.user_context,
        )

    async def execute(self, public_token: str) -> ExchangeResult:
        exchange = await self._aggregator.exchange_public_token(public_token)
        item_accounts = await self._aggregator.get_accounts(exchange.access_token)
        institution = await self._lookup_institution(item_accounts.institution_id)

        institution_id = (
            institution.institution_id if institution else item_accounts.institution_id
        )
        institution_name = institution.name if institution else None

        item = await self._item_repo.find_by_item_id(exchange.item_id)
        if item is None:
            item = LinkedItem(
                user_id=self._user_context.user_id,
                item_id=exchange.item_id,
                access_token=exchange.access_token,
                institution_id=institution_id,
                institution_name=institution_name,
                accounts=item_accounts.accounts,
            )
        else:
            item.relink(
                access_token=exchange.access_token,
                institution_id=institution_id,
                institution_name=institution_name,
                accounts=item_accounts.accounts,
            )
        await self._item_repo.save(item)

        logger.info(
            "Linked item %s (%d accounts) for user %s",
            exchange.item_id,
            len(item_accounts.accounts),
            self._user_context.user_id,
        )
        return ExchangeResult(
            item_id=exchange.item_id,
            accounts=item_accounts.accounts,
            institution=institution,
        )

    async def _lookup_institution(self, institution_id: str | None) -> Institution | None:
        if not institution_id:
            return None
        try:
            return await self._aggregator.get_institution(institution_id)
        except AggregatorError as e:
            logger.warning("Could not fetch institution %s: %s", institution_id, e)
            return None
