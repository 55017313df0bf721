from tillbook.application.commands.ledger.create_ledger_transaction_command import (
    CreateLedgerTransactionCommand,
)
from tillbook.application.commands.ledger.delete_ledger_transaction_command import (
    DeleteLedgerTransactionCommand,
)
from tillbook.application.commands.ledger.update_ledger_transaction_command import (
    UpdateLedgerTransactionCommand,
)

__all__ = [
    "CreateLedgerTransactionCommand",
    "DeleteLedgerTransactionCommand",
    "UpdateLedgerTransactionCommand",
]
