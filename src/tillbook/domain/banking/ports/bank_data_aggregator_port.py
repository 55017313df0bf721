"""Port for the bank-data aggregator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from tillbook.domain.banking.value_objects import (
        Institution,
        ItemAccounts,
        LinkToken,
        TokenExchange,
        TransactionPage,
        TransactionSyncPage,
    )


class BankDataAggregatorPort(ABC):
    """
    What the application needs from a bank-data aggregator.

    Implementations translate vendor errors into banking domain exceptions:
    ``AggregatorNotConfiguredError`` without credentials,
    ``ItemLoginRequiredError`` when the bank login expired, and
    ``AggregatorRequestError`` for every other rejected call.
    """

    @abstractmethod
    async def create_link_token(self, client_user_id: UUID) -> LinkToken:
        """Create a link token for the browser-side link flow."""

    @abstractmethod
    async def exchange_public_token(self, public_token: str) -> TokenExchange:
        """Swap the one-time public token for a long-lived access token."""

    @abstractmethod
    async def get_accounts(self, access_token: str) -> ItemAccounts:
        """Accounts (with balances) of the item behind ``access_token``."""

    @abstractmethod
    async def get_institution(self, institution_id: str) -> Institution | None:
        """Institution details, or None when the id is unknown."""

    @abstractmethod
    async def get_transactions(
        self,
        access_token: str,
        start_date: date,
        end_date: date,
        count: int,
        offset: int = 0,
    ) -> TransactionPage:
        """One page of transactions booked within ``[start_date, end_date]``.

        Parameters
        ----------
        access_token
            Item access token
        start_date
            First day, inclusive
        end_date
            Last day, inclusive
        count
            Page size
        offset
            Number of transactions to skip

        Returns
        -------
        The page plus the total number of matching transactions
        """

    @abstractmethod
    async def sync_transactions(
        self,
        access_token: str,
        cursor: str | None,
        count: int,
    ) -> TransactionSyncPage:
        """Changes since ``cursor`` (None starts from the beginning)."""

    @abstractmethod
    async def remove_item(self, access_token: str) -> None:
        """Revoke the access token at the aggregator."""
