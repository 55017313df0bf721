"""Read side of invoices, company assets and agreements."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

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


class ListRecordsQuery(Generic[R]):
    """The current user's records, most recently created first."""

    not_found: ClassVar[type[EntityNotFoundError]] = EntityNotFoundError

    def __init__(self, repository: RecordRepository[R]):
        self._repo = repository

    async def execute(self) -> list[R]:
        return await self._repo.find_all()

    async def get(self, record_id: str) -> R:
        record = await self._repo.find_by_id(record_id)
        if record is None:
            raise self.not_found(record_id)
        return record


class ListInvoicesQuery(ListRecordsQuery[Invoice]):
    not_found = InvoiceNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListInvoicesQuery:
        return cls(factory.invoice_repository())


class ListCompanyAssetsQuery(ListRecordsQuery[CompanyAsset]):
    not_found = CompanyAssetNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCompanyAssetsQuery:
        return cls(factory.company_asset_repository())


class ListAgreementsQuery(ListRecordsQuery[Agreement]):
    not_found = AgreementNotFoundError

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAgreementsQuery:
        return cls(factory.agreement_repository())
