from uuid import UUID

from pydantic import BaseModel

from tillbook.domain.user import User


class TeamMemberResponse(BaseModel):
    id: UUID
    email: str
    full_name: str | None
    role: str

    @classmethod
    def from_domain(cls, user: User) -> "TeamMemberResponse":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role.value,
        )
