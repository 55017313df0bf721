"""Store the onboarding questionnaire for the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tillbook.domain.user import BusinessProfile, UserNotFoundError

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class CompleteOnboardingCommand:
    """Save the business profile and mark onboarding as completed.

    Running it again overwrites the answers.
    """

    def __init__(self, user_repository: UserRepository, user_context: UserContext):
        self._user_repo = user_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CompleteOnboardingCommand:
        return cls(
            user_repository=factory.user_repository(),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        company_name: str,
        tax_filing_status: str = "sole_prop",
        business_category: str = "technology",
        state: str = "CA",
    ) -> User:
        profile = BusinessProfile(
            company_name=company_name,
            tax_filing_status=tax_filing_status,  # type: ignore[arg-type]
            business_category=business_category,  # type: ignore[arg-type]
            state=state,
        )

        user = await self._user_repo.find_by_id(self._user_context.user_id)
        if user is None:
            raise UserNotFoundError(self._user_context.user_id)

        user.complete_onboarding(profile)
        await self._user_repo.save(user)
        logger.info("Onboarding completed for %s", user.email)
        return user
