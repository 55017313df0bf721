from pydantic import BaseModel


class RouteAccessResponse(BaseModel):
    path: str
    allowed: bool
    redirect_to: str | None = None
    from_path: str | None = None
    require_auth: bool
    require_onboarding: bool
    require_admin: bool
    require_team_member: bool
