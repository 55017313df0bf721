"""Request-scoped identity of the current tenant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from tillbook.domain.user.aggregates import User


@dataclass(frozen=True)
class UserContext:
    """
    Who the current request acts for.

    Tenant-scoped repositories take this at construction and filter every
    query on ``user_id``; nothing in the application layer passes user ids
    to them explicitly.
    """

    user_id: UUID
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email)

    @classmethod
    def from_values(cls, user_id: UUID, email: str) -> UserContext:
        return cls(user_id=user_id, email=email)

    def __str__(self) -> str:
        return f"UserContext({self.email})"
