"""Invoices a tenant sends to its clients."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from tillbook.domain.records.entities.tenant_record import TenantRecord
from tillbook.domain.shared.time import utc_now


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


def default_invoice_number(now: datetime | None = None) -> str:
    """``INV-`` followed by the creation time in epoch milliseconds."""
    now = now or utc_now()
    return f"INV-{int(now.timestamp() * 1000)}"


class Invoice(TenantRecord):
    UPDATABLE = frozenset(
        {"invoice_number", "client_name", "amount", "status", "due_date", "items", "notes"},
    )

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        client_name: str,
        amount: Decimal | int | str = 0,
        invoice_number: str | None = None,
        status: InvoiceStatus | str = InvoiceStatus.PENDING,
        due_date: date | None = None,
        items: list[dict[str, Any]] | None = None,
        notes: str | None = None,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        super().__init__(user_id, id=id, created_at=created_at, updated_at=updated_at)
        self._client_name = self._required_text(client_name, "Client name")
        self._amount = self._money(amount)
        self._invoice_number = (invoice_number or "").strip() or default_invoice_number(
            self._created_at,
        )
        self._status = InvoiceStatus(status)
        self._due_date = due_date
        self._items = list(items) if items is not None else None
        self._notes = notes

    @property
    def invoice_number(self) -> str:
        return self._invoice_number

    @property
    def client_name(self) -> str:
        return self._client_name

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def status(self) -> InvoiceStatus:
        return self._status

    @property
    def due_date(self) -> date | None:
        return self._due_date

    @property
    def items(self) -> list[dict[str, Any]] | None:
        return self._items

    @property
    def notes(self) -> str | None:
        return self._notes

    def _set_field(self, name: str, value: Any) -> None:
        if name == "client_name":
            self._client_name = self._required_text(value, "Client name")
        elif name == "invoice_number":
            self._invoice_number = self._required_text(value, "Invoice number")
        elif name == "amount":
            self._amount = self._money(value)
        elif name == "status":
            self._status = InvoiceStatus(value)
        elif name == "items":
            self._items = list(value)
        else:
            super()._set_field(name, value)
