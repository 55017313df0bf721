from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from tillbook.domain.records import (
    AgreementNotFoundError,
    CompanyAssetNotFoundError,
    InvoiceNotFoundError,
)
from tillbook.domain.shared.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.records import RecordRepository


class DeleteRecordCommand:
    not_found: ClassVar[type[EntityNotFoundError]] = EntityNotFoundError

    def __init__(self, repository: RecordRepository):
        self._repo = repository

    async def execute(self, record_id: str) -> None:
        # Repositories are user scoped: other tenants' ids are simply not found
        if not await self._repo.delete(record_id):
            raise self.not_found(record_id)


class DeleteInvoiceCommand(DeleteRecordCommand):
    not_found = InvoiceNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteInvoiceCommand:
        return cls(factory.invoice_repository())


class DeleteCompanyAssetCommand(DeleteRecordCommand):
    not_found = CompanyAssetNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCompanyAssetCommand:
        return cls(factory.company_asset_repository())


class DeleteAgreementCommand(DeleteRecordCommand):
    not_found = AgreementNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteAgreementCommand:
        return cls(factory.agreement_repository())
