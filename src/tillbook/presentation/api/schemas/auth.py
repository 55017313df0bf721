"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tillbook.domain.user import BusinessCategory, TaxFilingStatus, User


class RegisterRequest(BaseModel):
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (8-128 characters)",
    )
    full_name: str | None = Field(default=None, max_length=200)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "owner@example.com",
                "password": "securepassword123",
                "full_name": "Sam Owner",
            },
        },
    )


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    """The refresh token may come in the body or in the HttpOnly cookie."""

    refresh_token: str | None = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8, max_length=128)


class UpdateProfileRequest(BaseModel):
    """Profile fields a user may edit. Omitted fields stay unchanged."""

    full_name: str | None = Field(default=None, max_length=200)
    company_name: str | None = Field(default=None, max_length=200)
    tax_filing_status: TaxFilingStatus | None = None
    business_category: BusinessCategory | None = None
    state: str | None = Field(default=None, min_length=2, max_length=2)

    model_config = ConfigDict(extra="forbid")


class UserResponse(BaseModel):
    id: UUID
    email: str
    role: str
    full_name: str | None
    company_name: str | None
    onboarding_completed: bool
    tax_filing_status: str | None
    business_category: str | None
    state: str | None
    is_admin: bool
    is_team_member: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User, is_team_member: bool) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            full_name=user.full_name,
            company_name=user.company_name,
            onboarding_completed=user.onboarding_completed,
            tax_filing_status=(
                user.tax_filing_status.value if user.tax_filing_status else None
            ),
            business_category=(
                user.business_category.value if user.business_category else None
            ),
            state=user.state,
            is_admin=user.is_admin,
            is_team_member=is_team_member,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class TokenResponse(BaseModel):
    """Access token; the refresh token travels in an HttpOnly cookie."""

    access_token: str
    refresh_token: str | None = Field(
        default=None,
        description="Also set as HttpOnly cookie",
    )
    token_type: Literal["bearer"] = "bearer"
    expires_in: int


class AuthResponse(TokenResponse):
    user: UserResponse
    redirect_to: str = Field(..., description="Where the client should go next")
