"""Read-side use cases."""

from tillbook.application.queries.admin import (
    AdminStats,
    AdminStatsQuery,
    ListUsersWithStatsQuery,
)
from tillbook.application.queries.banking import (
    AccountView,
    FetchedTransactions,
    FetchTransactionsQuery,
    GetInstitutionQuery,
    InstitutionSummary,
    LinkedAccountsResult,
    ListLinkedAccountsQuery,
)
from tillbook.application.queries.ledger import ListLedgerTransactionsQuery
from tillbook.application.queries.records import (
    ListAgreementsQuery,
    ListCompanyAssetsQuery,
    ListInvoicesQuery,
)
from tillbook.application.queries.user import (
    ListTeamMembersQuery,
    OnboardingStatus,
    OnboardingStatusQuery,
    OnboardingSteps,
)

__all__ = [
    "AccountView",
    "AdminStats",
    "AdminStatsQuery",
    "FetchTransactionsQuery",
    "FetchedTransactions",
    "GetInstitutionQuery",
    "InstitutionSummary",
    "LinkedAccountsResult",
    "ListAgreementsQuery",
    "ListCompanyAssetsQuery",
    "ListInvoicesQuery",
    "ListLedgerTransactionsQuery",
    "ListLinkedAccountsQuery",
    "ListTeamMembersQuery",
    "ListUsersWithStatsQuery",
    "OnboardingStatus",
    "OnboardingStatusQuery",
    "OnboardingSteps",
]
