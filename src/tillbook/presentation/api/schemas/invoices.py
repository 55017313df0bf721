"""Invoice schemas."""

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tillbook.domain.records import Invoice, InvoiceStatus


class InvoiceCreate(BaseModel):
    client_name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(default=Decimal(0), ge=0, decimal_places=2)
    invoice_number: str | None = Field(
        default=None,
        max_length=50,
        description="Defaults to INV-<epoch milliseconds>",
    )
    status: InvoiceStatus = InvoiceStatus.PENDING
    due_date: dt.date | None = None
    items: list[dict[str, Any]] | None = None
    notes: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "client_name": "Acme Corp",
                "amount": "1200.00",
                "due_date": "2024-04-30",
                "items": [{"description": "Consulting", "quantity": 8, "rate": 150}],
            },
        },
    )


class InvoiceUpdate(BaseModel):
    """Partial update; omitted fields are left as they are."""

    client_name: str | None = Field(default=None, min_length=1, max_length=255)
    amount: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    invoice_number: str | None = Field(default=None, min_length=1, max_length=50)
    status: InvoiceStatus | None = None
    due_date: dt.date | None = None
    items: list[dict[str, Any]] | None = None
    notes: str | None = None

    model_config = ConfigDict(extra="forbid")


class InvoiceResponse(BaseModel):
    id: str
    invoice_number: str
    client_name: str
    amount: Decimal
    status: InvoiceStatus
    due_date: dt.date | None
    items: list[dict[str, Any]] | None
    notes: str | None
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            client_name=invoice.client_name,
            amount=invoice.amount,
            status=invoice.status,
            due_date=invoice.due_date,
            items=invoice.items,
            notes=invoice.notes,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )
