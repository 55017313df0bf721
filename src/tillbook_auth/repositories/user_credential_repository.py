"""Storage contract for password credentials."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID


@dataclass(frozen=True)
class LockoutPolicy:
    """How many consecutive failures lock an account, and for how long."""

    max_failed_attempts: int = 5
    lockout_minutes: int = 15

    @property
    def lockout_duration(self) -> timedelta:
        return timedelta(minutes=self.lockout_minutes)


@dataclass(frozen=True)
class CredentialRecord:
    """Snapshot of a user's stored credential."""

    user_id: UUID
    password_hash: str
    failed_login_attempts: int
    locked_until: datetime | None
    last_login_at: datetime | None

    def is_locked(self, now: datetime | None = None) -> bool:
        if self.locked_until is None:
            return False
        now = now or datetime.now(tz=timezone.utc)
        locked_until = self.locked_until
        if locked_until.tzinfo is None:
            # SQLite drops the offset; stored values are always UTC
            locked_until = locked_until.replace(tzinfo=timezone.utc)
        return now < locked_until


class UserCredentialRepository(ABC):
    """Persistence for password hashes and login-failure bookkeeping.

    Implementations are not scoped to a tenant: credentials are looked up
    by user id before any user context exists.
    """

    def __init__(self, lockout_policy: LockoutPolicy | None = None):
        self.lockout_policy = lockout_policy or LockoutPolicy()

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> CredentialRecord:
        """Create the credential for ``user_id`` or replace its hash."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> CredentialRecord | None:
        """Return the credential, or None for unknown users."""

    @abstractmethod
    async def record_failed_attempt(self, user_id: UUID) -> CredentialRecord | None:
        """Count a failed login, locking the account once the policy trips.

        Returns
        -------
        The updated record, or None when the user has no credential.
        """

    @abstractmethod
    async def record_successful_login(self, user_id: UUID) -> None:
        """Clear the failure counter and any lock, stamp ``last_login_at``."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Remove the credential. Returns False when nothing was stored."""
