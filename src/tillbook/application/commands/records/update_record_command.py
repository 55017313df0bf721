"""Partial updates of invoices, company assets and agreements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from tillbook.domain.records import (
    Agreement,
    AgreementNotFoundError,
    CompanyAsset,
    CompanyAssetNotFoundError,
    Invoice,
    InvoiceNotFoundError,
    TenantRecord,
)
from tillbook.domain.shared.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.records import RecordRepository

R = TypeVar("R", bound=TenantRecord)


class UpdateRecordCommand(Generic[R]):
    not_found: ClassVar[type[EntityNotFoundError]] = EntityNotFoundError

    def __init__(self, repository: RecordRepository[R]):
        self._repo = repository

    async def execute(self, record_id: str, **changes: Any) -> R:
        record = await self._repo.find_by_id(record_id)
        if record is None:
            raise self.not_found(record_id)

        record.update(**changes)
        await self._repo.save(record)
        return record


class UpdateInvoiceCommand(UpdateRecordCommand[Invoice]):
    not_found = InvoiceNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateInvoiceCommand:
        return cls(factory.invoice_repository())


class UpdateCompanyAssetCommand(UpdateRecordCommand[CompanyAsset]):
    not_found = CompanyAssetNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCompanyAssetCommand:
        return cls(factory.company_asset_repository())


class UpdateAgreementCommand(UpdateRecordCommand[Agreement]):
    not_found = AgreementNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateAgreementCommand:
        return cls(factory.agreement_repository())
