"""SQLAlchemy implementation of AdminReadPort.

User counts are aggregated in Python from three narrow columns so the
"updated today" check does not depend on backend date functions.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tillbook.application.dtos.admin import AggregateStats, TenantActivity, UserStats
from tillbook.application.ports import AdminReadPort
from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.domain.user import UserRole
from tillbook.infrastructure.persistence.sqlalchemy.models import (
    LedgerTransactionModel,
    UserModel,
)

CENT = Decimal("0.01")
TEAM_ROLES = frozenset({UserRole.TEAM_MEMBER.value, UserRole.ADMIN.value})


def _to_decimal(value: object) -> Decimal:
    # SQLite returns SUM over NUMERIC as float
    if value is None:
        return Decimal("0")
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class SqlAlchemyAdminReadAdapter(AdminReadPort):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def user_stats(self, today: date) -> UserStats:
        stmt = select(
            UserModel.role,
            UserModel.onboarding_completed,
            UserModel.updated_at,
        )
        rows = (await self._session.execute(stmt)).all()

        return UserStats(
            total_users=len(rows),
            onboarded_users=sum(1 for r in rows if r.onboarding_completed),
            active_today=sum(
                1
                for r in rows
                if r.updated_at and ensure_tz_aware(r.updated_at).date() == today
            ),
            team_members=sum(1 for r in rows if r.role in TEAM_ROLES),
        )

    async def aggregate_stats(self) -> AggregateStats:
        activity = await self.activity_by_user()
        total_expenses = sum(
            (a.total_expenses for a in activity.values()),
            Decimal("0"),
        )
        total_transactions = sum(a.transaction_count for a in activity.values())
        average = (
            (total_expenses / len(activity)).quantize(CENT, rounding=ROUND_HALF_UP)
            if activity
            else Decimal("0")
        )
        return AggregateStats(
            total_expenses=total_expenses,
            total_transactions=total_transactions,
            total_revenue=Decimal("0"),
            avg_expense_per_user=average,
        )

    async def activity_by_user(self) -> dict[UUID, TenantActivity]:
        stmt = select(
            LedgerTransactionModel.user_id,
            func.count(LedgerTransactionModel.id),
            func.sum(LedgerTransactionModel.amount),
        ).group_by(LedgerTransactionModel.user_id)
        rows = (await self._session.execute(stmt)).all()
        return {
            user_id: TenantActivity(
                transaction_count=int(count),
                total_expenses=_to_decimal(total),
            )
            for user_id, count, total in rows
        }
