from tillbook.application.queries.user.list_team_members_query import (
    ListTeamMembersQuery,
)
from tillbook.application.queries.user.onboarding_status_query import (
    OnboardingStatus,
    OnboardingStatusQuery,
    OnboardingSteps,
)

__all__ = [
    "ListTeamMembersQuery",
    "OnboardingStatus",
    "OnboardingStatusQuery",
    "OnboardingSteps",
]
