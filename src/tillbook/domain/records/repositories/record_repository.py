"""Record repository interfaces (tenant scoped)."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from tillbook.domain.records.entities import (
    Agreement,
    CompanyAsset,
    Invoice,
    TenantRecord,
)

R = TypeVar("R", bound=TenantRecord)


class RecordRepository(ABC, Generic[R]):
    @abstractmethod
    async def find_all(self) -> list[R]:
        """All of the current user's records, most recently created first."""

    @abstractmethod
    async def find_by_id(self, record_id: str) -> R | None:
        """None for unknown ids and for other tenants' records."""

    @abstractmethod
    async def save(self, record: R) -> None:
        """Insert or update."""

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Returns False when nothing was deleted."""


class InvoiceRepository(RecordRepository[Invoice]):
    pass


class CompanyAssetRepository(RecordRepository[CompanyAsset]):
    pass


class AgreementRepository(RecordRepository[Agreement]):
    pass
