from tillbook.application.queries.records.list_records_query import (
    ListAgreementsQuery,
    ListCompanyAssetsQuery,
    ListInvoicesQuery,
)

__all__ = ["ListAgreementsQuery", "ListCompanyAssetsQuery", "ListInvoicesQuery"]
