from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.user import TeamMembershipPolicy, User, UserRepository


class ListTeamMembersQuery:
    """Users who count as internal staff, by role or by e-mail rule.

    Feeds the "made by" picker on ledger transactions.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        team_policy: TeamMembershipPolicy,
    ):
        self._user_repo = user_repository
        self._team_policy = team_policy

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        team_policy: TeamMembershipPolicy,
    ) -> ListTeamMembersQuery:
        return cls(user_repository=factory.user_repository(), team_policy=team_policy)

    async def execute(self) -> list[User]:
        users = await self._user_repo.list_all()
        members = [u for u in users if self._team_policy.is_team_member(u)]
        return sorted(members, key=lambda u: (u.full_name or u.email).lower())
