"""SQLAlchemy credential store."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tillbook_auth.persistence.sqlalchemy.user_credential_model import (
    UserCredentialModel,
)
from tillbook_auth.repositories import (
    CredentialRecord,
    LockoutPolicy,
    UserCredentialRepository,
)

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    def __init__(
        self,
        session: AsyncSession,
        lockout_policy: LockoutPolicy | None = None,
    ):
        super().__init__(lockout_policy)
        self._session = session

    async def save(self, user_id: UUID, password_hash: str) -> CredentialRecord:
        model = await self._get(user_id)
        if model is None:
            model = UserCredentialModel(user_id=user_id, password_hash=password_hash)
            self._session.add(model)
            logger.info("Created credentials for user %s", user_id)
        else:
            model.password_hash = password_hash
            logger.debug("Replaced password hash for user %s", user_id)
        await self._session.flush()
        return self._to_record(model)

    async def find_by_user_id(self, user_id: UUID) -> CredentialRecord | None:
        model = await self._get(user_id)
        return self._to_record(model) if model else None

    async def record_failed_attempt(self, user_id: UUID) -> CredentialRecord | None:
        model = await self._get(user_id)
        if model is None:
            return None

        model.failed_login_attempts = (model.failed_login_attempts or 0) + 1
        if model.failed_login_attempts >= self.lockout_policy.max_failed_attempts:
            model.locked_until = (
                datetime.now(tz=timezone.utc) + self.lockout_policy.lockout_duration
            )
            logger.warning(
                "Locking user %s after %d failed logins",
                user_id,
                model.failed_login_attempts,
            )
        await self._session.flush()
        return self._to_record(model)

    async def record_successful_login(self, user_id: UUID) -> None:
        model = await self._get(user_id)
        if model is None:
            return
        model.failed_login_attempts = 0
        model.locked_until = None
        model.last_login_at = datetime.now(tz=timezone.utc)
        await self._session.flush()

    async def delete(self, user_id: UUID) -> bool:
        model = await self._get(user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted credentials for user %s", user_id)
        return True

    async def _get(self, user_id: UUID) -> UserCredentialModel | None:
        result = await self._session.execute(
            select(UserCredentialModel).where(UserCredentialModel.user_id == user_id),
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _to_record(model: UserCredentialModel) -> CredentialRecord:
        return CredentialRecord(
            user_id=model.user_id,
            password_hash=model.password_hash,
            failed_login_attempts=model.failed_login_attempts or 0,
            locked_until=model.locked_until,
            last_login_at=model.last_login_at,
        )
