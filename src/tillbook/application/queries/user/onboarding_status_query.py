"""Onboarding progress derived from the user's data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tillbook.domain.user import UserNotFoundError

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.banking.repositories import LinkedItemRepository
    from tillbook.domain.ledger import LedgerTransactionRepository
    from tillbook.domain.user import UserRepository


@dataclass(frozen=True)
class OnboardingSteps:
    company_profile: bool
    bank_connected: bool
    has_transactions: bool


@dataclass(frozen=True)
class OnboardingStatus:
    needs_onboarding: bool
    completed_steps: OnboardingSteps


class OnboardingStatusQuery:
    """Which onboarding steps the current user has already done.

    Steps are not stored; they are read off the profile, the linked items
    and the ledger.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        linked_item_repository: LinkedItemRepository,
        ledger_repository: LedgerTransactionRepository,
        user_context: UserContext,
    ):
        self._user_repo = user_repository
        self._item_repo = linked_item_repository
        self._ledger_repo = ledger_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> OnboardingStatusQuery:
        return cls(
            user_repository=factory.user_repository(),
            linked_item_repository=factory.linked_item_repository(),
            ledger_repository=factory.ledger_transaction_repository(),
            user_context=factory.user_context,
        )

    async def execute(self) -> OnboardingStatus:
        user = await self._user_repo.find_by_id(self._user_context.user_id)
        if user is None:
            raise UserNotFoundError(self._user_context.user_id)

        active_items = await self._item_repo.find_active()
        transaction_count = await self._ledger_repo.count()

        return OnboardingStatus(
            needs_onboarding=not user.onboarding_completed,
            completed_steps=OnboardingSteps(
                company_profile=bool(user.company_name),
                bank_connected=bool(active_items),
                has_transactions=transaction_count > 0,
            ),
        )
