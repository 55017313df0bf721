from __future__ import annotations

from typing import TYPE_CHECKING

from tillbook.application.dtos.admin import TenantActivity, UserOverview

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.application.ports import AdminReadPort
    from tillbook.domain.user import UserRepository


class ListUsersWithStatsQuery:
    """All users, newest first, each with their ledger activity."""

    def __init__(self, user_repository: UserRepository, admin_read_port: AdminReadPort):
        self._user_repo = user_repository
        self._read_port = admin_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersWithStatsQuery:
        return cls(
            user_repository=factory.user_repository(),
            admin_read_port=factory.admin_read_port(),
        )

    async def execute(self) -> list[UserOverview]:
        users = await self._user_repo.list_all()
        activity = await self._read_port.activity_by_user()

        overviews = []
        for user in users:
            stats = activity.get(user.id, TenantActivity())
            overviews.append(
                UserOverview(
                    id=user.id,
                    email=user.email,
                    role=user.role.value,
                    full_name=user.full_name,
                    company_name=user.company_name,
                    onboarding_completed=user.onboarding_completed,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                    transaction_count=stats.transaction_count,
                    total_expenses=stats.total_expenses,
                ),
            )
        return overviews
