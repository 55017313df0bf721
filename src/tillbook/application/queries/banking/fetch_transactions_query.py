"""Live transaction fetch across all of a user's bank connections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from tillbook.domain.banking import AggregatorError, NoConnectedAccountsError
from tillbook.domain.shared import ErrorCode, ValidationError, today_utc

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking import LinkedItem
    from tillbook.domain.banking.ports import BankDataAggregatorPort
    from tillbook.domain.banking.repositories import LinkedItemRepository
    from tillbook.domain.banking.value_objects import (
        AggregatorTransaction,
        LinkedAccount,
    )

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 30
DEFAULT_PAGE_SIZE = 500


@dataclass(frozen=True)
class FetchedTransactions:
    transactions: list[AggregatorTransaction]
    accounts: list[LinkedAccount]
    start_date: date
    end_date: date
    total_transactions: int


class FetchTransactionsQuery:
    """
    Fetch transactions for a date window from every active item.

    Parameters
    ----------
    aggregator
        Bank-data aggregator
    linked_item_repository
        Current user's items
    default_days
        Lookback used when ``start_date`` is omitted
    page_size
        Aggregator page size; pages are requested until the reported
        total is reached

    Items that fail are logged and skipped; the rest still return. The
    result is ordered newest first, with equal dates keeping the order
    the aggregator returned them in.
    """

    def __init__(
        self,
        aggregator: BankDataAggregatorPort,
        linked_item_repository: LinkedItemRepository,
        default_days: int = DEFAULT_LOOKBACK_DAYS,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._aggregator = aggregator
        self._item_repo = linked_item_repository
        self._default_days = default_days
        self._page_size = page_size

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: BankDataAggregatorPort,
        default_days: int = DEFAULT_LOOKBACK_DAYS,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> FetchTransactionsQuery:
        return cls(
            aggregator=aggregator,
            linked_item_repository=factory.linked_item_repository(),
            default_days=default_days,
            page_size=page_size,
        )

    def resolve_window(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> tuple[date, date]:
        end = end_date or today_utc()
        start = start_date or today_utc() - timedelta(days=self._default_days)
        if start > end:
            msg = f"start_date {start} is after end_date {end}"
            raise ValidationError(msg, code=ErrorCode.INVALID_DATE_RANGE)
        return start, end

    async def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> FetchedTransactions:
        start, end = self.resolve_window(start_date, end_date)

        items = await self._item_repo.find_active()
        if not items:
            raise NoConnectedAccountsError

        transactions: list[AggregatorTransaction] = []
        accounts: list[LinkedAccount] = []
        for item in items:
            try:
                item_transactions, item_accounts = await self._fetch_item(item, start, end)
            except AggregatorError as e:
                logger.error(
                    "Could not fetch transactions for item %s: %s",
                    item.item_id,
                    e.message,
                )
                continue
            transactions.extend(item_transactions)
            accounts.extend(item_accounts)

        # sorted() is stable, so same-day transactions keep aggregator order
        transactions = sorted(transactions, key=lambda t: t.date, reverse=True)

        logger.info(
            "Fetched %d transactions from %d items (%s..%s)",
            len(transactions),
            len(items),
            start,
            end,
        )
        return FetchedTransactions(
            transactions=transactions,
            accounts=accounts,
            start_date=start,
            end_date=end,
            total_transactions=len(transactions),
        )

    async def _fetch_item(
        self,
        item: LinkedItem,
        start: date,
        end: date,
    ) -> tuple[list[AggregatorTransaction], list[LinkedAccount]]:
        page = await self._aggregator.get_transactions(
            item.access_token,
            start,
            end,
            count=self._page_size,
            offset=0,
        )
        transactions = list(page.transactions)
        while page.transactions and len(transactions) < page.total_transactions:
            page = await self._aggregator.get_transactions(
                item.access_token,
                start,
                end,
                count=self._page_size,
                offset=len(transactions),
            )
            transactions.extend(page.transactions)
        return transactions, list(page.accounts)
