"""Invoices of the current tenant."""

from fastapi import APIRouter, status

from tillbook.application.commands import (
    CreateInvoiceCommand,
    DeleteInvoiceCommand,
    UpdateInvoiceCommand,
)
from tillbook.application.queries import ListInvoicesQuery
from tillbook.presentation.api.dependencies import OnboardedUser, RepoFactory
from tillbook.presentation.api.schemas.invoices import (
    InvoiceCreate,
    InvoiceResponse,
    InvoiceUpdate,
)

router = APIRouter()


@router.get("", summary="List invoices")
async def list_invoices(_user: OnboardedUser, factory: RepoFactory) -> list[InvoiceResponse]:
    """All of the current user's invoices, most recently created first."""
    invoices = await ListInvoicesQuery.from_factory(factory).execute()
    return [InvoiceResponse.from_domain(i) for i in invoices]


@router.get(
    "/{invoice_id}",
    summary="Get an invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def get_invoice(
    invoice_id: str,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> InvoiceResponse:
    invoice = await ListInvoicesQuery.from_factory(factory).get(invoice_id)
    return InvoiceResponse.from_domain(invoice)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an invoice")
async def create_invoice(
    request: InvoiceCreate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> InvoiceResponse:
    invoice = await CreateInvoiceCommand.from_factory(factory).execute(**request.model_dump())
    await factory.session.commit()
    return InvoiceResponse.from_domain(invoice)


@router.patch(
    "/{invoice_id}",
    summary="Update an invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def update_invoice(
    invoice_id: str,
    request: InvoiceUpdate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> InvoiceResponse:
    command = UpdateInvoiceCommand.from_factory(factory)
    invoice = await command.execute(invoice_id, **request.model_dump(exclude_unset=True))
    await factory.session.commit()
    return InvoiceResponse.from_domain(invoice)


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def delete_invoice(invoice_id: str, _user: OnboardedUser, factory: RepoFactory) -> None:
    await DeleteInvoiceCommand.from_factory(factory).execute(invoice_id)
    await factory.session.commit()
