from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from tillbook.domain.user import (
    CannotDemoteSelfError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateUserRoleCommand:
    """Change another user's role."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateUserRoleCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(
        self,
        user_id: UUID,
        new_role: UserRole,
        requesting_admin_id: UUID,
    ) -> User:
        new_role = UserRole(new_role)
        if user_id == requesting_admin_id and new_role != UserRole.ADMIN:
            raise CannotDemoteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        user.change_role(new_role)
        await self._user_repo.save(user)
        logger.info("Role of %s set to %s", user.email, new_role.value)
        return user
