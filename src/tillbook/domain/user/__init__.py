"""User domain: identity, role, and the onboarding business profile."""

from tillbook.domain.user.aggregates import User
from tillbook.domain.user.exceptions import (
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    InvalidBusinessProfileError,
    InvalidEmailError,
    RegistrationClosedError,
    UserNotFoundError,
)
from tillbook.domain.user.repositories import UserRepository
from tillbook.domain.user.services import TeamMembershipPolicy
from tillbook.domain.user.value_objects import (
    BusinessCategory,
    BusinessProfile,
    Email,
    TaxFilingStatus,
    UserRole,
)

__all__ = [
    "BusinessCategory",
    "BusinessProfile",
    "CannotDeleteSelfError",
    "CannotDemoteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidBusinessProfileError",
    "InvalidEmailError",
    "RegistrationClosedError",
    "TaxFilingStatus",
    "TeamMembershipPolicy",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
