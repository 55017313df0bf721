"""Route guard evaluation for the browser client."""

from fastapi import APIRouter, Query

from tillbook.domain.access import resolve_route_requirement
from tillbook.presentation.api.dependencies import AccessPolicyDep, OptionalCurrentUser
from tillbook.presentation.api.schemas.access import RouteAccessResponse

router = APIRouter()


@router.get("/route", summary="Check access to a client route")
async def check_route(
    user: OptionalCurrentUser,
    access_policy: AccessPolicyDep,
    path: str = Query(..., description="Client route, e.g. /dashboard"),
) -> RouteAccessResponse:
    """
    Decide whether the caller may open ``path`` and where to redirect if not.

    Works without a token; anonymous callers are sent to ``/login``.
    """
    requirement = resolve_route_requirement(path)
    decision = access_policy.evaluate(user, path, requirement)
    return RouteAccessResponse(
        path=path,
        allowed=decision.allowed,
        redirect_to=decision.redirect_to,
        from_path=decision.from_path,
        require_auth=requirement.require_auth,
        require_onboarding=requirement.require_onboarding,
        require_admin=requirement.require_admin,
        require_team_member=requirement.require_team_member,
    )
