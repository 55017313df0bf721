from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tillbook.application.dtos.admin import AggregateStats, UserStats
from tillbook.domain.shared import today_utc

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.application.ports import AdminReadPort


@dataclass(frozen=True)
class AdminStats:
    users: UserStats
    aggregate: AggregateStats


class AdminStatsQuery:
    """Dashboard numbers across all tenants."""

    def __init__(self, admin_read_port: AdminReadPort):
        self._read_port = admin_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AdminStatsQuery:
        return cls(admin_read_port=factory.admin_read_port())

    async def execute(self) -> AdminStats:
        return AdminStats(
            users=await self._read_port.user_stats(today_utc()),
            aggregate=await self._read_port.aggregate_stats(),
        )
