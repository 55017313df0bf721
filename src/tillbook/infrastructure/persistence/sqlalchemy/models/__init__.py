from tillbook.infrastructure.persistence.sqlalchemy.models.agreement_model import (
    AgreementModel,
)
from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from tillbook.infrastructure.persistence.sqlalchemy.models.company_asset_model import (  # NOQA: E501
    CompanyAssetModel,
)
from tillbook.infrastructure.persistence.sqlalchemy.models.invoice_model import (
    InvoiceModel,
)
from tillbook.infrastructure.persistence.sqlalchemy.models.ledger_transaction_model import (  # NOQA: E501
    LedgerTransactionModel,
)
from tillbook.infrastructure.persistence.sqlalchemy.models.linked_item_model import (
    LinkedItemModel,
)
from tillbook.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "AgreementModel",
    "Base",
    "CompanyAssetModel",
    "InvoiceModel",
    "LedgerTransactionModel",
    "LinkedItemModel",
    "TimestampMixin",
    "UserModel",
]
