from tillbook.domain.banking.value_objects.aggregator_transaction import (
    AggregatorTransaction,
    TransactionLocation,
    TransactionPage,
    TransactionSyncPage,
)
from tillbook.domain.banking.value_objects.institution import Institution
from tillbook.domain.banking.value_objects.link_token import LinkToken, TokenExchange
from tillbook.domain.banking.value_objects.linked_account import (
    AccountBalances,
    ItemAccounts,
    LinkedAccount,
)

__all__ = [
    "AccountBalances",
    "AggregatorTransaction",
    "Institution",
    "ItemAccounts",
    "LinkToken",
    "LinkedAccount",
    "TokenExchange",
    "TransactionLocation",
    "TransactionPage",
    "TransactionSyncPage",
]
