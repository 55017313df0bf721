"""Bank linking and live bank data through the aggregator."""

import logging
from datetime import date

from fastapi import APIRouter, Query

from tillbook.application.commands import (
    CreateLinkTokenCommand,
    DisconnectItemCommand,
    ExchangePublicTokenCommand,
    SyncTransactionsCommand,
)
from tillbook.application.queries import (
    FetchTransactionsQuery,
    GetInstitutionQuery,
    ListLinkedAccountsQuery,
)
from tillbook.domain.banking.value_objects import Institution
from tillbook.presentation.api.dependencies import (
    BankAggregator,
    CurrentUser,
    RepoFactory,
    SettingsDep,
)
from tillbook.presentation.api.schemas.plaid import (
    AccountResponse,
    AccountsResponse,
    DisconnectRequest,
    DisconnectResponse,
    ExchangeTokenRequest,
    ExchangeTokenResponse,
    InstitutionRef,
    LinkTokenResponse,
    SyncErrorResponse,
    SyncResponse,
    TransactionResponse,
    TransactionsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/link-token",
    summary="Create a link token",
    responses={503: {"description": "Aggregator not configured"}},
)
async def create_link_token(
    factory: RepoFactory,
    aggregator: BankAggregator,
) -> LinkTokenResponse:
    token = await CreateLinkTokenCommand.from_factory(factory, aggregator).execute()
    return LinkTokenResponse(link_token=token.link_token, expiration=token.expiration)


@router.post(
    "/exchange-token",
    summary="Connect a bank",
    responses={502: {"description": "Aggregator rejected the token"}},
)
async def exchange_token(
    request: ExchangeTokenRequest,
    factory: RepoFactory,
    aggregator: BankAggregator,
) -> ExchangeTokenResponse:
    """
    Exchange the public token from the link flow and store the connection.

    Returns the connected accounts with balances.
    """
    command = ExchangePublicTokenCommand.from_factory(factory, aggregator)
    result = await command.execute(request.public_token)
    await factory.session.commit()

    institution_name = result.institution.name if result.institution else None
    return ExchangeTokenResponse(
        item_id=result.item_id,
        accounts=[
            AccountResponse.from_account(a, institution_name) for a in result.accounts
        ],
        institution=result.institution,
    )


@router.get("/accounts", summary="List connected accounts")
async def list_accounts(
    factory: RepoFactory,
    aggregator: BankAggregator,
) -> AccountsResponse:
    """
    Accounts of every active connection.

    If the aggregator is unavailable for a connection, its stored accounts
    are returned without balances.
    """
    result = await ListLinkedAccountsQuery.from_factory(factory, aggregator).execute()
    return AccountsResponse(
        accounts=[
            AccountResponse.from_account(view.account, view.institution_name)
            for view in result.accounts
        ],
        institutions=[
            InstitutionRef(name=i.name, institution_id=i.institution_id)
            for i in result.institutions
        ],
    )


@router.get(
    "/transactions",
    summary="Fetch bank transactions",
    responses={
        400: {"description": "start_date after end_date"},
        404: {"description": "No connected accounts"},
    },
)
async def fetch_transactions(
    factory: RepoFactory,
    aggregator: BankAggregator,
    settings: SettingsDep,
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
) -> TransactionsResponse:
    """
    Transactions from all connected banks, newest first.

    Without dates the window is the last ``transactions_default_days`` days.
    """
    query = FetchTransactionsQuery.from_factory(
        factory,
        aggregator,
        default_days=settings.transactions_default_days,
        page_size=settings.transactions_page_size,
    )
    result = await query.execute(start_date=start_date, end_date=end_date)
    return TransactionsResponse(
        transactions=[TransactionResponse.from_transaction(t) for t in result.transactions],
        accounts=[AccountResponse.from_account(a) for a in result.accounts],
        total_transactions=result.total_transactions,
        start_date=result.start_date,
        end_date=result.end_date,
    )


@router.post("/sync", summary="Import bank transactions into the ledger")
async def sync_transactions(
    factory: RepoFactory,
    aggregator: BankAggregator,
    settings: SettingsDep,
) -> SyncResponse:
    """
    Pull new, changed and removed transactions since the last sync.

    Connections whose bank login expired are reported in ``errors`` and
    marked as needing re-authentication.
    """
    command = SyncTransactionsCommand.from_factory(
        factory,
        aggregator,
        page_size=settings.transactions_page_size,
    )
    result = await command.execute()
    await factory.session.commit()

    return SyncResponse(
        added=[TransactionResponse.from_transaction(t) for t in result.added],
        modified=[TransactionResponse.from_transaction(t) for t in result.modified],
        removed=result.removed,
        items_synced=result.items_synced,
        errors=[
            SyncErrorResponse(
                item_id=e.item_id,
                institution_name=e.institution_name,
                error_code=e.error_code,
                message=e.message,
            )
            for e in result.errors
        ],
    )


@router.get(
    "/institutions/{institution_id}",
    summary="Get institution details",
    responses={404: {"description": "Unknown institution"}},
)
async def get_institution(
    institution_id: str,
    _user: CurrentUser,
    aggregator: BankAggregator,
) -> Institution:
    return await GetInstitutionQuery(aggregator).execute(institution_id)


@router.post(
    "/disconnect",
    summary="Disconnect a bank",
    responses={404: {"description": "Unknown connection"}},
)
async def disconnect(
    request: DisconnectRequest,
    factory: RepoFactory,
    aggregator: BankAggregator,
) -> DisconnectResponse:
    await DisconnectItemCommand.from_factory(factory, aggregator).execute(request.item_id)
    await factory.session.commit()
    return DisconnectResponse(item_id=request.item_id)
