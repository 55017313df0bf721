"""Write-side use cases."""

from tillbook.application.commands.admin import DeleteUserCommand, UpdateUserRoleCommand
from tillbook.application.commands.banking import (
    CreateLinkTokenCommand,
    DisconnectItemCommand,
    ExchangePublicTokenCommand,
    ExchangeResult,
    ItemSyncError,
    SyncResult,
    SyncTransactionsCommand,
)
from tillbook.application.commands.ledger import (
    CreateLedgerTransactionCommand,
    DeleteLedgerTransactionCommand,
    UpdateLedgerTransactionCommand,
)
from tillbook.application.commands.records import (
    CreateAgreementCommand,
    CreateCompanyAssetCommand,
    CreateInvoiceCommand,
    DeleteAgreementCommand,
    DeleteCompanyAssetCommand,
    DeleteInvoiceCommand,
    UpdateAgreementCommand,
    UpdateCompanyAssetCommand,
    UpdateInvoiceCommand,
)
from tillbook.application.commands.user import (
    CompleteOnboardingCommand,
    UpdateProfileCommand,
)

__all__ = [
    "CompleteOnboardingCommand",
    "CreateAgreementCommand",
    "CreateCompanyAssetCommand",
    "CreateInvoiceCommand",
    "CreateLedgerTransactionCommand",
    "CreateLinkTokenCommand",
    "DeleteAgreementCommand",
    "DeleteCompanyAssetCommand",
    "DeleteInvoiceCommand",
    "DeleteLedgerTransactionCommand",
    "DeleteUserCommand",
    "DisconnectItemCommand",
    "ExchangePublicTokenCommand",
    "ExchangeResult",
    "ItemSyncError",
    "SyncResult",
    "SyncTransactionsCommand",
    "UpdateAgreementCommand",
    "UpdateCompanyAssetCommand",
    "UpdateInvoiceCommand",
    "UpdateLedgerTransactionCommand",
    "UpdateProfileCommand",
    "UpdateUserRoleCommand",
]
