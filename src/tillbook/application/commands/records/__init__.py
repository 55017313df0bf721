from tillbook.application.commands.records.create_agreement_command import (
    CreateAgreementCommand,
)
from tillbook.application.commands.records.create_company_asset_command import (
    CreateCompanyAssetCommand,
)
from tillbook.application.commands.records.create_invoice_command import (
    CreateInvoiceCommand,
)
from tillbook.application.commands.records.delete_record_command import (
    DeleteAgreementCommand,
    DeleteCompanyAssetCommand,
    DeleteInvoiceCommand,
)
from tillbook.application.commands.records.update_record_command import (
    UpdateAgreementCommand,
    UpdateCompanyAssetCommand,
    UpdateInvoiceCommand,
)

__all__ = [
    "CreateAgreementCommand",
    "CreateCompanyAssetCommand",
    "CreateInvoiceCommand",
    "DeleteAgreementCommand",
    "DeleteCompanyAssetCommand",
    "DeleteInvoiceCommand",
    "UpdateAgreementCommand",
    "UpdateCompanyAssetCommand",
    "UpdateInvoiceCommand",
]
