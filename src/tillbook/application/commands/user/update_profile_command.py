from __future__ import annotations

from typing import TYPE_CHECKING

from tillbook.domain.user import (
    InvalidBusinessProfileError,
    UserNotFoundError,
)
from tillbook.domain.user.value_objects.business_profile import STATE_CODE_PATTERN

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.user import User, UserRepository


class UpdateProfileCommand:
    """Edit profile fields of the current user. Role and onboarding stay as they are."""

    def __init__(self, user_repository: UserRepository, user_context: UserContext):
        self._user_repo = user_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProfileCommand:
        return cls(
            user_repository=factory.user_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        full_name: str | None = None,
        company_name: str | None = None,
        tax_filing_status: str | None = None,
        business_category: str | None = None,
        state: str | None = None,
    ) -> User:
        if state is not None and not STATE_CODE_PATTERN.match(state.strip().upper()):
            msg = f"State must be a two-letter code, got {state!r}"
            raise InvalidBusinessProfileError(msg)

        user = await self._user_repo.find_by_id(self._user_context.user_id)
        if user is None:
            raise UserNotFoundError(self._user_context.user_id)

        try:
            user.update_profile(
                full_name=full_name,
                company_name=company_name,
                tax_filing_status=tax_filing_status,
                business_category=business_category,
                state=state,
            )
        except ValueError as e:
            raise InvalidBusinessProfileError(str(e)) from e

        await self._user_repo.save(user)
        return user
