from tillbook.application.queries.banking.fetch_transactions_query import (
    FetchedTransactions,
    FetchTransactionsQuery,
)
from tillbook.application.queries.banking.get_institution_query import (
    GetInstitutionQuery,
)
from tillbook.application.queries.banking.list_linked_accounts_query import (
    AccountView,
    InstitutionSummary,
    LinkedAccountsResult,
    ListLinkedAccountsQuery,
)

__all__ = [
    "AccountView",
    "FetchTransactionsQuery",
    "FetchedTransactions",
    "GetInstitutionQuery",
    "InstitutionSummary",
    "LinkedAccountsResult",
    "ListLinkedAccountsQuery",
]
