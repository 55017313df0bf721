"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from tillbook.domain.user.aggregates import User


class UserRepository(ABC):
    """Users are global, not tenant scoped."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by id."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by (case-insensitive) e-mail."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update a user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already owns the e-mail.
        """

    @abstractmethod
    async def delete_with_all_data(self, user_id: UUID) -> None:
        """Delete a user together with every row the tenant owns."""

    @abstractmethod
    async def count(self) -> int:
        """Count users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """All users, newest first."""
