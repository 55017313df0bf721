"""Onboarding questionnaire and progress."""

import logging

from fastapi import APIRouter

from tillbook.application.commands import CompleteOnboardingCommand
from tillbook.application.queries import OnboardingStatusQuery
from tillbook.presentation.api.dependencies import AccessPolicyDep, RepoFactory
from tillbook.presentation.api.schemas.auth import UserResponse
from tillbook.presentation.api.schemas.onboarding import (
    CompletedStepsResponse,
    CompleteOnboardingRequest,
    OnboardingStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/status", summary="Get onboarding status")
async def get_onboarding_status(factory: RepoFactory) -> OnboardingStatusResponse:
    """
    Onboarding status of the current user.

    Steps are derived from data:
    - company_profile: a company name is set
    - bank_connected: an active bank connection exists
    - has_transactions: the ledger is not empty
    """
    status = await OnboardingStatusQuery.from_factory(factory).execute()
    return OnboardingStatusResponse(
        needs_onboarding=status.needs_onboarding,
        completed_steps=CompletedStepsResponse(
            company_profile=status.completed_steps.company_profile,
            bank_connected=status.completed_steps.bank_connected,
            has_transactions=status.completed_steps.has_transactions,
        ),
    )


@router.post(
    "/complete",
    summary="Complete onboarding",
    responses={
        200: {"description": "Profile saved, onboarding completed"},
        400: {"description": "Invalid profile data"},
    },
)
async def complete_onboarding(
    request: CompleteOnboardingRequest,
    factory: RepoFactory,
    access_policy: AccessPolicyDep,
) -> UserResponse:
    """Save the business profile. Submitting again overwrites it."""
    command = CompleteOnboardingCommand.from_factory(factory)
    user = await command.execute(
        company_name=request.company_name,
        tax_filing_status=request.tax_filing_status.value,
        business_category=request.business_category.value,
        state=request.state,
    )
    await factory.session.commit()
    return UserResponse.from_user(user, is_team_member=access_policy.is_team_member(user))
