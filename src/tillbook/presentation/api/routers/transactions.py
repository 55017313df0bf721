"""Ledger transactions of the current tenant."""

from fastapi import APIRouter, status

from tillbook.application.commands import (
    CreateLedgerTransactionCommand,
    DeleteLedgerTransactionCommand,
    UpdateLedgerTransactionCommand,
)
from tillbook.application.queries import ListLedgerTransactionsQuery
from tillbook.presentation.api.dependencies import OnboardedUser, RepoFactory
from tillbook.presentation.api.schemas.transactions import (
    LedgerTransactionCreate,
    LedgerTransactionResponse,
    LedgerTransactionUpdate,
)

router = APIRouter()


@router.get("", summary="List ledger transactions")
async def list_transactions(
    _user: OnboardedUser,
    factory: RepoFactory,
) -> list[LedgerTransactionResponse]:
    """All of the current user's transactions, newest first."""
    transactions = await ListLedgerTransactionsQuery.from_factory(factory).execute()
    return [LedgerTransactionResponse.from_domain(t) for t in transactions]


@router.get(
    "/{transaction_id}",
    summary="Get a ledger transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def get_transaction(
    transaction_id: str,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> LedgerTransactionResponse:
    transaction = await ListLedgerTransactionsQuery.from_factory(factory).get(transaction_id)
    return LedgerTransactionResponse.from_domain(transaction)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a ledger transaction",
)
async def create_transaction(
    request: LedgerTransactionCreate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> LedgerTransactionResponse:
    command = CreateLedgerTransactionCommand.from_factory(factory)
    transaction = await command.execute(**request.model_dump())
    await factory.session.commit()
    return LedgerTransactionResponse.from_domain(transaction)


@router.patch(
    "/{transaction_id}",
    summary="Update a ledger transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def update_transaction(
    transaction_id: str,
    request: LedgerTransactionUpdate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> LedgerTransactionResponse:
    command = UpdateLedgerTransactionCommand.from_factory(factory)
    transaction = await command.execute(
        transaction_id,
        **request.model_dump(exclude_unset=True),
    )
    await factory.session.commit()
    return LedgerTransactionResponse.from_domain(transaction)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a ledger transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def delete_transaction(
    transaction_id: str,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> None:
    await DeleteLedgerTransactionCommand.from_factory(factory).execute(transaction_id)
    await factory.session.commit()
