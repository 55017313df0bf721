"""Route guards: who may see which page, and where to send everyone else.

The browser client asks ``GET /api/v1/access/route`` before rendering a
page; the API enforces the same rules through FastAPI dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tillbook.domain.user.services import TeamMembershipPolicy

if TYPE_CHECKING:
    from tillbook.domain.user.aggregates import User

LOGIN_PATH = "/login"
HOME_PATH = "/"
ONBOARDING_PATH = "/onboarding"
TEAM_PATH = "/team"

PUBLIC_PATHS = frozenset({LOGIN_PATH, "/auth/callback"})


@dataclass(frozen=True)
class AccessRequirement:
    require_auth: bool = True
    require_onboarding: bool = True
    require_admin: bool = False
    require_team_member: bool = False

    @classmethod
    def public(cls) -> AccessRequirement:
        return cls(require_auth=False, require_onboarding=False)


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    redirect_to: str | None = None
    from_path: str | None = None  # remembered for the post-login return

    @classmethod
    def allow(cls) -> AccessDecision:
        return cls(allowed=True)

    @classmethod
    def redirect(cls, target: str, from_path: str | None = None) -> AccessDecision:
        return cls(allowed=False, redirect_to=target, from_path=from_path)


def _normalize(path: str) -> str:
    return "/" + (path or "").split("?", 1)[0].strip("/")


def _is_under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def resolve_route_requirement(path: str) -> AccessRequirement:
    """Return the guard configuration for a client route."""
    path = _normalize(path)
    if path in PUBLIC_PATHS:
        return AccessRequirement.public()
    if _is_under(path, ONBOARDING_PATH):
        return AccessRequirement(require_onboarding=False)
    if _is_under(path, "/admin"):
        return AccessRequirement(require_onboarding=False, require_admin=True)
    if _is_under(path, TEAM_PATH):
        return AccessRequirement(require_onboarding=False, require_team_member=True)
    return AccessRequirement()


class AccessPolicy:
    """Evaluates an ``AccessRequirement`` for a (possibly anonymous) user.

    Rules are checked in a fixed order and the first failing rule wins:
    authentication, admin role, team membership, onboarding.
    """

    def __init__(self, team_policy: TeamMembershipPolicy | None = None):
        self._team_policy = team_policy or TeamMembershipPolicy()

    def is_team_member(self, user: User) -> bool:
        return self._team_policy.is_team_member(user)

    def evaluate(
        self,
        user: User | None,
        path: str,
        requirement: AccessRequirement | None = None,
    ) -> AccessDecision:
        path = _normalize(path)
        requirement = requirement or resolve_route_requirement(path)

        if user is None:
            if requirement.require_auth:
                return AccessDecision.redirect(LOGIN_PATH, from_path=path)
            return AccessDecision.allow()

        if requirement.require_admin and not user.is_admin:
            return AccessDecision.redirect(HOME_PATH)

        if requirement.require_team_member and not self.is_team_member(user):
            return AccessDecision.redirect(HOME_PATH)

        if (
            requirement.require_onboarding
            and not user.onboarding_completed
            and not path.startswith(ONBOARDING_PATH)
        ):
            return AccessDecision.redirect(ONBOARDING_PATH)

        return AccessDecision.allow()

    def post_login_redirect(self, user: User) -> str:
        """Where a freshly signed-in user lands."""
        if self.is_team_member(user) or user.onboarding_completed:
            return HOME_PATH
        return ONBOARDING_PATH
