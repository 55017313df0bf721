"""Business records: invoices, company assets and client agreements."""

from tillbook.domain.records.entities import (
    Agreement,
    AgreementStatus,
    AssetCategory,
    CompanyAsset,
    Invoice,
    InvoiceStatus,
    TenantRecord,
    default_invoice_number,
)
from tillbook.domain.records.exceptions import (
    AgreementNotFoundError,
    CompanyAssetNotFoundError,
    InvoiceNotFoundError,
)
from tillbook.domain.records.repositories import (
    AgreementRepository,
    CompanyAssetRepository,
    InvoiceRepository,
    RecordRepository,
)

__all__ = [
    "Agreement",
    "AgreementNotFoundError",
    "AgreementRepository",
    "AgreementStatus",
    "AssetCategory",
    "CompanyAsset",
    "CompanyAssetNotFoundError",
    "CompanyAssetRepository",
    "Invoice",
    "InvoiceNotFoundError",
    "InvoiceRepository",
    "InvoiceStatus",
    "RecordRepository",
    "TenantRecord",
    "default_invoice_number",
]
