"""Repository factory protocol for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from tillbook.application.ports import AdminReadPort
from tillbook.domain.banking.repositories import LinkedItemRepository
from tillbook.domain.ledger.repositories import LedgerTransactionRepository
from tillbook.domain.records.repositories import (
    AgreementRepository,
    CompanyAssetRepository,
    InvoiceRepository,
)
from tillbook.domain.user.repositories import UserRepository
from tillbook_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from tillbook.application.context import UserContext


class RepositoryFactory(Protocol):
    """Creates repositories scoped to ``user_context``."""

    @property
    def user_context(self) -> UserContext: ...

    @property
    def session(self) -> Any:
        """Unit of work handle; the presentation layer commits or rolls back."""
        ...

    def user_repository(self) -> UserRepository: ...

    def credential_repository(self) -> UserCredentialRepository: ...

    def linked_item_repository(self) -> LinkedItemRepository: ...

    def ledger_transaction_repository(self) -> LedgerTransactionRepository: ...

    def invoice_repository(self) -> InvoiceRepository: ...

    def company_asset_repository(self) -> CompanyAssetRepository: ...

    def agreement_repository(self) -> AgreementRepository: ...

    def admin_read_port(self) -> AdminReadPort: ...
