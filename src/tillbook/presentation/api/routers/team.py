"""Internal staff directory."""

from fastapi import APIRouter

from tillbook.application.queries import ListTeamMembersQuery
from tillbook.presentation.api.dependencies import RepoFactory, TeamMemberUser, TeamPolicy
from tillbook.presentation.api.schemas.team import TeamMemberResponse

router = APIRouter()


@router.get(
    "/members",
    summary="List team members",
    responses={403: {"description": "Team member access required"}},
)
async def list_team_members(
    _member: TeamMemberUser,
    factory: RepoFactory,
    team_policy: TeamPolicy,
) -> list[TeamMemberResponse]:
    """Staff who can be named as the person behind an expense."""
    members = await ListTeamMembersQuery.from_factory(factory, team_policy).execute()
    return [TeamMemberResponse.from_domain(u) for u in members]
