"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.domain.user import Email, EmailAlreadyExistsError, User, UserRepository
from tillbook.infrastructure.persistence.sqlalchemy.models import (
    AgreementModel,
    CompanyAssetModel,
    InvoiceModel,
    LedgerTransactionModel,
    LinkedItemModel,
    UserModel,
)

TENANT_TABLES = (
    LedgerTransactionModel,
    LinkedItemModel,
    InvoiceModel,
    CompanyAssetModel,
    AgreementModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._get(user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == Email(email).value)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def save(self, user: User) -> None:
        existing = await self._get(user.id)
        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user %s (%s)", user.id, user.role.value)
            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete_with_all_data(self, user_id: UUID) -> None:
        # Explicit deletes: SQLite ignores ON DELETE CASCADE unless enabled
        for model in TENANT_TABLES:
            await self._session.execute(delete(model).where(model.user_id == user_id))
        await self._session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self._session.flush()
        logger.info("Deleted user %s and all tenant data", user_id)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(UserModel.id)))
        return int(result.scalar_one())

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _get(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    @staticmethod
    def _map_to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            role=model.role,
            full_name=model.full_name,
            company_name=model.company_name,
            onboarding_completed=bool(model.onboarding_completed),
            tax_filing_status=model.tax_filing_status,
            business_category=model.business_category,
            state=model.state,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(id=user.id, created_at=user.created_at)
        self._update_model(model, user)
        return model

    @staticmethod
    def _update_model(model: UserModel, user: User) -> None:
        model.email = user.email
        model.role = user.role.value
        model.full_name = user.full_name
        model.company_name = user.company_name
        model.onboarding_completed = user.onboarding_completed
        model.tax_filing_status = (
            user.tax_filing_status.value if user.tax_filing_status else None
        )
        model.business_category = (
            user.business_category.value if user.business_category else None
        )
        model.state = user.state
        model.updated_at = user.updated_at
