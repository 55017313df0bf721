from pydantic import BaseModel, Field

from tillbook.domain.user import BusinessCategory, TaxFilingStatus


class CompleteOnboardingRequest(BaseModel):
    """Answers of the onboarding questionnaire."""

    company_name: str = Field(..., min_length=1, max_length=200)
    tax_filing_status: TaxFilingStatus = TaxFilingStatus.SOLE_PROP
    business_category: BusinessCategory = BusinessCategory.TECHNOLOGY
    state: str = Field(default="CA", min_length=2, max_length=2)


class CompletedStepsResponse(BaseModel):
    company_profile: bool
    bank_connected: bool
    has_transactions: bool


class OnboardingStatusResponse(BaseModel):
    needs_onboarding: bool
    completed_steps: CompletedStepsResponse
