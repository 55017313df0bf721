from tillbook.application.commands.banking.create_link_token_command import (
    CreateLinkTokenCommand,
)
from tillbook.application.commands.banking.disconnect_item_command import (
    DisconnectItemCommand,
)
from tillbook.application.commands.banking.exchange_public_token_command import (
    ExchangePublicTokenCommand,
    ExchangeResult,
)
from tillbook.application.commands.banking.sync_transactions_command import (
    ItemSyncError,
    SyncResult,
    SyncTransactionsCommand,
)

__all__ = [
    "CreateLinkTokenCommand",
    "DisconnectItemCommand",
    "ExchangePublicTokenCommand",
    "ExchangeResult",
    "ItemSyncError",
    "SyncResult",
    "SyncTransactionsCommand",
]
