from tillbook.domain.records.entities.agreement import Agreement, AgreementStatus
from tillbook.domain.records.entities.company_asset import AssetCategory, CompanyAsset
from tillbook.domain.records.entities.invoice import (
    Invoice,
    InvoiceStatus,
    default_invoice_number,
)
from tillbook.domain.records.entities.tenant_record import TenantRecord

__all__ = [
    "Agreement",
    "AgreementStatus",
    "AssetCategory",
    "CompanyAsset",
    "Invoice",
    "InvoiceStatus",
    "TenantRecord",
    "default_invoice_number",
]
