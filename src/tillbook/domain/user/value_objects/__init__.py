from tillbook.domain.user.value_objects.business_profile import (
    BusinessCategory,
    BusinessProfile,
    TaxFilingStatus,
)
from tillbook.domain.user.value_objects.email import Email
from tillbook.domain.user.value_objects.user_role import UserRole

__all__ = [
    "BusinessCategory",
    "BusinessProfile",
    "Email",
    "TaxFilingStatus",
    "UserRole",
]
