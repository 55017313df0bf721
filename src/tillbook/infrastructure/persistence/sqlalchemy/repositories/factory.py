"""SQLAlchemy implementation of the RepositoryFactory protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from tillbook.infrastructure.persistence.sqlalchemy.adapters import (
    SqlAlchemyAdminReadAdapter,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.banking import (
    LinkedItemRepositorySQLAlchemy,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.ledger import (
    LedgerTransactionRepositorySQLAlchemy,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.records import (
    AgreementRepositorySQLAlchemy,
    CompanyAssetRepositorySQLAlchemy,
    InvoiceRepositorySQLAlchemy,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from tillbook.infrastructure.security import FernetEncryptionService
from tillbook_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy

if TYPE_CHECKING:
    from tillbook.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """Builds repositories bound to one session and one tenant.

    Instances are cached per factory, i.e. per request.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        encryption_key: str | bytes,
    ):
        self._session = session
        self._user_context = user_context
        self._encryption_key = encryption_key

        self._linked_item_repo: LinkedItemRepositorySQLAlchemy | None = None
        self._ledger_repo: LedgerTransactionRepositorySQLAlchemy | None = None

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        return UserRepositorySQLAlchemy(self._session)

    def credential_repository(self) -> UserCredentialRepositorySQLAlchemy:
        return UserCredentialRepositorySQLAlchemy(self._session)

    def linked_item_repository(self) -> LinkedItemRepositorySQLAlchemy:
        if self._linked_item_repo is None:
            self._linked_item_repo = LinkedItemRepositorySQLAlchemy(
                self._session,
                self._user_context,
                FernetEncryptionService(self._encryption_key),
            )
        return self._linked_item_repo

    def ledger_transaction_repository(self) -> LedgerTransactionRepositorySQLAlchemy:
        if self._ledger_repo is None:
            self._ledger_repo = LedgerTransactionRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._ledger_repo

    def invoice_repository(self) -> InvoiceRepositorySQLAlchemy:
        return InvoiceRepositorySQLAlchemy(self._session, self._user_context)

    def company_asset_repository(self) -> CompanyAssetRepositorySQLAlchemy:
        return CompanyAssetRepositorySQLAlchemy(self._session, self._user_context)

    def agreement_repository(self) -> AgreementRepositorySQLAlchemy:
        return AgreementRepositorySQLAlchemy(self._session, self._user_context)

    def admin_read_port(self) -> SqlAlchemyAdminReadAdapter:
        return SqlAlchemyAdminReadAdapter(self._session)
