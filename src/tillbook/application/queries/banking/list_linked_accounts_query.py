"""Accounts across all of a user's bank connections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tillbook.domain.banking import AggregatorError

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking import LinkedItem
    from tillbook.domain.banking.ports import BankDataAggregatorPort
    from tillbook.domain.banking.repositories import LinkedItemRepository
    from tillbook.domain.banking.value_objects import LinkedAccount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountView:
    account: LinkedAccount
    institution_name: str | None
    item_id: str
    cached: bool = False  # snapshot without balances


@dataclass(frozen=True)
class InstitutionSummary:
    name: str
    institution_id: str | None = None


@dataclass
class LinkedAccountsResult:
    accounts: list[AccountView] = field(default_factory=list)
    institutions: list[InstitutionSummary] = field(default_factory=list)


class ListLinkedAccountsQuery:
    """
    Fresh account data for every active item.

    When the aggregator fails for an item, that item's stored snapshot is
    returned instead and its institution is left out of ``institutions``.
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
    ) -> ListLinkedAccountsQuery:
        return cls(
            aggregator=aggregator,
            linked_item_repository=factory.linked_item_repository(),
        )

    async def execute(self) -> LinkedAccountsResult:
        result = LinkedAccountsResult()
        for item in await self._item_repo.find_active():
            try:
                item_accounts = await self._aggregator.get_accounts(item.access_token)
            except AggregatorError as e:
                logger.error(
                    "Could not fetch accounts for item %s, using cached snapshot: %s",
                    item.item_id,
                    e.message,
                )
                result.accounts.extend(self._views(item, item.accounts, cached=True))
                continue

            result.accounts.extend(self._views(item, item_accounts.accounts))
            self._add_institution(result, item)
        return result

    @staticmethod
    def _views(
        item: LinkedItem,
        accounts: list[LinkedAccount],
        cached: bool = False,
    ) -> list[AccountView]:
        return [
            AccountView(
                account=account,
                institution_name=item.institution_name,
                item_id=item.item_id,
                cached=cached,
            )
            for account in accounts
        ]

    @staticmethod
    def _add_institution(result: LinkedAccountsResult, item: LinkedItem) -> None:
        if not item.institution_name:
            return
        if any(i.name == item.institution_name for i in result.institutions):
            return
        result.institutions.append(
            InstitutionSummary(
                name=item.institution_name,
                institution_id=item.institution_id,
            ),
        )
