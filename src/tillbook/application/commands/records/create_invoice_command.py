from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from tillbook.domain.records import Invoice, InvoiceStatus

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.records import InvoiceRepository


class CreateInvoiceCommand:
    """Create an invoice; number and status fall back to their defaults."""

    def __init__(self, invoice_repository: InvoiceRepository, user_context: UserContext):
        self._invoice_repo = invoice_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateInvoiceCommand:
        return cls(
            invoice_repository=factory.invoice_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        client_name: str,
        amount: Decimal = Decimal(0),
        invoice_number: str | None = None,
        status: InvoiceStatus | str | None = None,
        due_date: date | None = None,
        items: list[dict[str, Any]] | None = None,
        notes: str | None = None,
    ) -> Invoice:
        invoice = Invoice(
            user_id=self._user_context.user_id,
            client_name=client_name,
            amount=amount,
            invoice_number=invoice_number,
            status=status or InvoiceStatus.PENDING,
            due_date=due_date,
            items=items,
            notes=notes,
        )
        await self._invoice_repo.save(invoice)
        return invoice
