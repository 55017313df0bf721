"""Answers collected by the onboarding questionnaire."""

import re
from dataclasses import dataclass
from enum import Enum

from tillbook.domain.user.exceptions import InvalidBusinessProfileError

STATE_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


class TaxFilingStatus(str, Enum):
    SOLE_PROP = "sole_prop"
    LLC = "llc"
    S_CORP = "s_corp"
    C_CORP = "c_corp"
    PARTNERSHIP = "partnership"


class BusinessCategory(str, Enum):
    TECHNOLOGY = "technology"
    CONSULTING = "consulting"
    ECOMMERCE = "ecommerce"
    CREATIVE = "creative"
    HEALTHCARE = "healthcare"
    REAL_ESTATE = "realestate"
    OTHER = "other"


@dataclass(frozen=True)
class BusinessProfile:
    company_name: str
    tax_filing_status: TaxFilingStatus = TaxFilingStatus.SOLE_PROP
    business_category: BusinessCategory = BusinessCategory.TECHNOLOGY
    state: str = "CA"

    def __post_init__(self) -> None:
        name = (self.company_name or "").strip()
        if not name:
            raise InvalidBusinessProfileError("Company name is required")

        state = (self.state or "").strip().upper()
        if not STATE_CODE_PATTERN.match(state):
            raise InvalidBusinessProfileError(
                f"State must be a two-letter code, got {self.state!r}",
            )

        try:
            tax_status = TaxFilingStatus(self.tax_filing_status)
            category = BusinessCategory(self.business_category)
        except ValueError as e:
            raise InvalidBusinessProfileError(str(e)) from e

        object.__setattr__(self, "company_name", name)
        object.__setattr__(self, "state", state)
        object.__setattr__(self, "tax_filing_status", tax_status)
        object.__setattr__(self, "business_category", category)
