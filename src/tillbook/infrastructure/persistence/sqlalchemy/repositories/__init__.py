from tillbook.infrastructure.persistence.sqlalchemy.repositories.banking import (
    LinkedItemRepositorySQLAlchemy,
)
from tillbook.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
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

__all__ = [
    "AgreementRepositorySQLAlchemy",
    "CompanyAssetRepositorySQLAlchemy",
    "InvoiceRepositorySQLAlchemy",
    "LedgerTransactionRepositorySQLAlchemy",
    "LinkedItemRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
