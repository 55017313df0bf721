"""SQLAlchemy implementation of LedgerTransactionRepository."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tillbook.domain.ledger import (
    DuplicateBankTransactionError,
    LedgerTransaction,
    LedgerTransactionRepository,
)
from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.infrastructure.persistence.sqlalchemy.models import (
    LedgerTransactionModel,
)

if TYPE_CHECKING:
    from tillbook.application.context import UserContext

logger = logging.getLogger(__name__)


class LedgerTransactionRepositorySQLAlchemy(LedgerTransactionRepository):
    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def find_all(self) -> list[LedgerTransaction]:
        stmt = (
            select(LedgerTransactionModel)
            .where(LedgerTransactionModel.user_id == self._user_id)
            .order_by(
                LedgerTransactionModel.date.desc(),
                LedgerTransactionModel.created_at.desc(),
            )
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_id(self, transaction_id: str) -> LedgerTransaction | None:
        model = await self._get_by_id(transaction_id)
        return self._map_to_domain(model) if model else None

    async def find_by_bank_id(self, bank_id: str) -> LedgerTransaction | None:
        model = await self._get_by_bank_id(bank_id)
        return self._map_to_domain(model) if model else None

    async def save(self, transaction: LedgerTransaction) -> None:
        model = await self._get_by_id(transaction.id)
        if model is None:
            model = LedgerTransactionModel(
                id=transaction.id,
                user_id=self._user_id,
                created_at=transaction.created_at,
            )
            self._session.add(model)

        model.date = transaction.date
        model.vendor = transaction.vendor
        model.amount = transaction.amount
        model.category = transaction.category
        model.context = transaction.context
        model.made_by = transaction.made_by
        model.bank_verified = transaction.bank_verified
        model.bank_id = transaction.bank_id
        model.source = transaction.source.value
        model.updated_at = transaction.updated_at
        try:
            await self._session.flush()
        except IntegrityError as e:
            if transaction.bank_id and "unique" in str(e).lower():
                raise DuplicateBankTransactionError(transaction.bank_id) from e
            raise

    async def delete(self, transaction_id: str) -> bool:
        return await self._delete_model(await self._get_by_id(transaction_id))

    async def delete_by_bank_id(self, bank_id: str) -> bool:
        return await self._delete_model(await self._get_by_bank_id(bank_id))

    async def count(self) -> int:
        stmt = select(func.count(LedgerTransactionModel.id)).where(
            LedgerTransactionModel.user_id == self._user_id,
        )
        return int((await self._session.execute(stmt)).scalar_one())

    async def _delete_model(self, model: LedgerTransactionModel | None) -> bool:
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted ledger transaction %s", model.id)
        return True

    async def _get_by_id(self, transaction_id: str) -> LedgerTransactionModel | None:
        stmt = select(LedgerTransactionModel).where(
            LedgerTransactionModel.user_id == self._user_id,
            LedgerTransactionModel.id == transaction_id,
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def _get_by_bank_id(self, bank_id: str) -> LedgerTransactionModel | None:
        stmt = select(LedgerTransactionModel).where(
            LedgerTransactionModel.user_id == self._user_id,
            LedgerTransactionModel.bank_id == bank_id,
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    @staticmethod
    def _map_to_domain(model: LedgerTransactionModel) -> LedgerTransaction:
        return LedgerTransaction(
            id=model.id,
            user_id=model.user_id,
            date=model.date,
            vendor=model.vendor,
            amount=Decimal(str(model.amount)),
            category=model.category,
            context=model.context,
            made_by=model.made_by,
            bank_verified=bool(model.bank_verified),
            bank_id=model.bank_id,
            source=model.source,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
