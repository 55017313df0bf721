"""Cross-tenant read access for administrators."""

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from tillbook.application.dtos.admin import AggregateStats, TenantActivity, UserStats


class AdminReadPort(ABC):
    """Aggregates over all tenants. Never exposed to non-admin callers."""

    @abstractmethod
    async def user_stats(self, today: date) -> UserStats:
        """Counts over the user table; ``active_today`` uses ``updated_at``."""

    @abstractmethod
    async def aggregate_stats(self) -> AggregateStats:
        """Totals over every tenant's ledger."""

    @abstractmethod
    async def activity_by_user(self) -> dict[UUID, TenantActivity]:
        """Transaction count and expense total per user with any transactions."""
