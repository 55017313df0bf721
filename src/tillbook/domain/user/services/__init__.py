from tillbook.domain.user.services.team_membership_policy import TeamMembershipPolicy

__all__ = ["TeamMembershipPolicy"]
