from tillbook.domain.shared.exceptions import (
    AccessDeniedError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    OnboardingRequiredError,
    ValidationError,
)
from tillbook.domain.shared.time import ensure_tz_aware, today_utc, utc_now

__all__ = [
    "AccessDeniedError",
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "OnboardingRequiredError",
    "ValidationError",
    "ensure_tz_aware",
    "today_utc",
    "utc_now",
]
