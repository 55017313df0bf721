"""Incremental transaction sync into the ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tillbook.domain.banking import AggregatorError, ItemLoginRequiredError
from tillbook.domain.banking.value_objects import AggregatorTransaction
from tillbook.domain.ledger import convert_aggregator_transaction

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking import LinkedItem
    from tillbook.domain.banking.ports import BankDataAggregatorPort
    from tillbook.domain.banking.repositories import LinkedItemRepository
    from tillbook.domain.ledger import LedgerTransactionRepository

logger = logging.getLogger(__name__)

DEFAULT_SYNC_PAGE_SIZE = 500


@dataclass(frozen=True)
class ItemSyncError:
    item_id: str
    institution_name: str | None
    error_code: str
    message: str


@dataclass
class SyncResult:
    added: list[AggregatorTransaction] = field(default_factory=list)
    modified: list[AggregatorTransaction] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    items_synced: int = 0
    errors: list[ItemSyncError] = field(default_factory=list)


@dataclass
class _ItemChanges:
    added: list[AggregatorTransaction] = field(default_factory=list)
    modified: list[AggregatorTransaction] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    cursor: str | None = None


class SyncTransactionsCommand:
    """
    Pull changes since the stored cursor for every active item and apply
    them to the ledger.

    Pages are collected completely before anything is written, so an
    aggregator failure half way leaves the item's cursor and ledger
    untouched. Items whose bank login expired are marked
    ``login_required``; other item failures are reported and skipped.
    """

    def __init__(  # NOQA: PLR0913
        self,
        aggregator: BankDataAggregatorPort,
        linked_item_repository: LinkedItemRepository,
        ledger_repository: LedgerTransactionRepository,
        user_context: UserContext,
        page_size: int = DEFAULT_SYNC_PAGE_SIZE,
    ):
        self._aggregator = aggregator
        self._item_repo = linked_item_repository
        self._ledger_repo = ledger_repository
        self._user_context = user_context
        self._page_size = page_size

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: BankDataAggregatorPort,
        page_size: int = DEFAULT_SYNC_PAGE_SIZE,
    ) -> SyncTransactionsCommand:
        return cls(
            aggregator=aggregator,
            linked_item_repository=factory.linked_item_repository(),
            ledger_repository=factory.ledger_transaction_repository(),
            user_context=factory.user_context,
            page_size=page_size,
        )

    async def execute(self) -> SyncResult:
        result = SyncResult()
        for item in await self._item_repo.find_active():
            try:
                changes = await self._pull(item)
            except ItemLoginRequiredError as e:
                item.mark_login_required()
                await self._item_repo.save(item)
                result.errors.append(self._error(item, e.code.value, e.message))
                logger.warning("Item %s needs re-authentication", item.item_id)
                continue
            except AggregatorError as e:
                result.errors.append(
                    self._error(item, getattr(e, "error_code", None) or e.code.value, e.message),
                )
                logger.error("Sync failed for item %s: %s", item.item_id, e.message)
                continue

            await self._apply(changes)
            if changes.cursor:
                item.advance_cursor(changes.cursor)
                await self._item_repo.save(item)

            result.added.extend(changes.added)
            result.modified.extend(changes.modified)
            result.removed.extend(changes.removed)
            result.items_synced += 1

        logger.info(
            "Synced %d items: %d added, %d modified, %d removed",
            result.items_synced,
            len(result.added),
            len(result.modified),
            len(result.removed),
        )
        return result

    async def _pull(self, item: LinkedItem) -> _ItemChanges:
        changes = _ItemChanges()
        cursor = item.transactions_cursor
        while True:
            page = await self._aggregator.sync_transactions(
                item.access_token,
                cursor,
                self._page_size,
            )
            changes.added.extend(page.added)
            changes.modified.extend(page.modified)
            changes.removed.extend(page.removed)
            cursor = page.next_cursor
            if not page.has_more:
                break
        changes.cursor = cursor
        return changes

    async def _apply(self, changes: _ItemChanges) -> None:
        user_id = self._user_context.user_id
        for transaction in [*changes.added, *changes.modified]:
            incoming = convert_aggregator_transaction(transaction, user_id)
            existing = await self._ledger_repo.find_by_bank_id(transaction.transaction_id)
            if existing is None:
                await self._ledger_repo.save(incoming)
            else:
                existing.replace_bank_data(incoming)
                await self._ledger_repo.save(existing)

        for transaction_id in changes.removed:
            await self._ledger_repo.delete_by_bank_id(transaction_id)

    @staticmethod
    def _error(item: LinkedItem, error_code: str, message: str) -> ItemSyncError:
        return ItemSyncError(
            item_id=item.item_id,
            institution_name=item.institution_name,
            error_code=error_code,
            message=message,
        )
