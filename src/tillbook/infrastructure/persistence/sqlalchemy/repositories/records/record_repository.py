"""Shared SQLAlchemy plumbing for the tenant scoped record tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tillbook.domain.records import TenantRecord

if TYPE_CHECKING:
    from tillbook.application.context import UserContext

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=TenantRecord)


class RecordRepositorySQLAlchemy(Generic[R]):
    """
    CRUD over one record table, always filtered by the current user.

    Subclasses set ``model`` and implement the two mapping hooks.
    """

    model: ClassVar[Any]

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def find_all(self) -> list[R]:
        stmt = (
            select(self.model)
            .where(self.model.user_id == self._user_id)
            .order_by(self.model.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_id(self, record_id: str) -> R | None:
        model = await self._get(record_id)
        return self._map_to_domain(model) if model else None

    async def save(self, record: R) -> None:
        model = await self._get(record.id)
        if model is None:
            model = self.model(
                id=record.id,
                user_id=self._user_id,
                created_at=record.created_at,
            )
            self._session.add(model)

        self._copy_to_model(record, model)
        model.updated_at = record.updated_at
        await self._session.flush()

    async def delete(self, record_id: str) -> bool:
        model = await self._get(record_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted %s %s", self.model.__tablename__, record_id)
        return True

    async def _get(self, record_id: str) -> Any:
        stmt = select(self.model).where(
            self.model.user_id == self._user_id,
            self.model.id == record_id,
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    @staticmethod
    def _copy_to_model(record: R, model: Any) -> None:
        raise NotImplementedError

    @staticmethod
    def _map_to_domain(model: Any) -> R:
        raise NotImplementedError
