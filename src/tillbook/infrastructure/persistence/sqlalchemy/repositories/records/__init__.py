from tillbook.infrastructure.persistence.sqlalchemy.repositories.records.agreement_repository import (  # NOQA: E501
    AgreementRepositorySQLAlchemy,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.records.company_asset_repository import (  # NOQA: E501
    CompanyAssetRepositorySQLAlchemy,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.records.invoice_repository import (  # NOQA: E501
    InvoiceRepositorySQLAlchemy,
)

__all__ = [
    "AgreementRepositorySQLAlchemy",
    "CompanyAssetRepositorySQLAlchemy",
    "InvoiceRepositorySQLAlchemy",
]
