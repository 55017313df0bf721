"""SQLAlchemy implementation of LinkedItemRepository.

Access tokens are encrypted on the way in and decrypted on the way out;
ciphertext never reaches the domain.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tillbook.domain.banking import ItemStatus, LinkedItem, LinkedItemRepository
from tillbook.domain.banking.value_objects import LinkedAccount
from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.infrastructure.persistence.sqlalchemy.models import LinkedItemModel

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.domain.security import EncryptionService

logger = logging.getLogger(__name__)


class LinkedItemRepositorySQLAlchemy(LinkedItemRepository):
    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        encryption_service: EncryptionService,
    ):
        self._session = session
        self._user_id = user_context.user_id
        self._encryption = encryption_service

    async def find_by_item_id(self, item_id: str) -> LinkedItem | None:
        model = await self._get(item_id)
        return self._map_to_domain(model) if model else None

    async def find_active(self) -> list[LinkedItem]:
        stmt = (
            select(LinkedItemModel)
            .where(
                LinkedItemModel.user_id == self._user_id,
                LinkedItemModel.status == ItemStatus.ACTIVE.value,
            )
            .order_by(LinkedItemModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def save(self, item: LinkedItem) -> None:
        model = await self._get(item.item_id)
        if model is None:
            model = LinkedItemModel(
                id=item.id,
                user_id=self._user_id,
                item_id=item.item_id,
                created_at=item.created_at,
            )
            self._session.add(model)
            logger.info("Linked new item %s for user %s", item.item_id, self._user_id)

        model.access_token_encrypted = self._encryption.encrypt(item.access_token)
        model.institution_id = item.institution_id
        model.institution_name = item.institution_name
        model.accounts = [a.model_dump(mode="json") for a in item.accounts]
        model.status = item.status.value
        model.transactions_cursor = item.transactions_cursor
        model.updated_at = item.updated_at
        await self._session.flush()

    async def _get(self, item_id: str) -> LinkedItemModel | None:
        stmt = select(LinkedItemModel).where(
            LinkedItemModel.user_id == self._user_id,
            LinkedItemModel.item_id == item_id,
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    def _map_to_domain(self, model: LinkedItemModel) -> LinkedItem:
        return LinkedItem(
            id=model.id,
            user_id=model.user_id,
            item_id=model.item_id,
            access_token=self._encryption.decrypt(model.access_token_encrypted),
            institution_id=model.institution_id,
            institution_name=model.institution_name,
            accounts=[LinkedAccount.model_validate(a) for a in model.accounts or []],
            status=model.status,
            transactions_cursor=model.transactions_cursor,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
