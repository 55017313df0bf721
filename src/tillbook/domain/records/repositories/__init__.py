from tillbook.domain.records.repositories.record_repository import (
    AgreementRepository,
    CompanyAssetRepository,
    InvoiceRepository,
    RecordRepository,
)

__all__ = [
    "AgreementRepository",
    "CompanyAssetRepository",
    "InvoiceRepository",
    "RecordRepository",
]
