from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from tillbook.domain.user import CannotDeleteSelfError, UserNotFoundError, UserRepository
from tillbook_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Delete a user with their credentials, linked items and ledger."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            credential_repository=factory.credential_repository(),
        )

    async def execute(self, user_id: UUID, requesting_admin_id: UUID) -> None:
        if user_id == requesting_admin_id:
            raise CannotDeleteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        await self._credential_repo.delete(user_id)
        await self._user_repo.delete_with_all_data(user_id)
        logger.info("Deleted user %s", user.email)
