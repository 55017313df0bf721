"""Ledger transaction schemas."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from tillbook.domain.ledger import DEFAULT_CATEGORY, LedgerTransaction


class LedgerTransactionCreate(BaseModel):
    date: dt.date
    vendor: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, decimal_places=2)
    category: str = Field(default=DEFAULT_CATEGORY, max_length=100)
    context: str | None = None
    made_by: str | None = Field(default=None, max_length=100)
    bank_verified: bool = False
    bank_id: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "2024-03-01",
                "vendor": "Office Depot",
                "amount": "42.50",
                "category": "Supplies & Materials",
            },
        },
    )


class LedgerTransactionUpdate(BaseModel):
    """Partial update; omitted fields are left as they are."""

    date: dt.date | None = None
    vendor: str | None = Field(default=None, min_length=1, max_length=255)
    amount: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    category: str | None = Field(default=None, max_length=100)
    context: str | None = None
    made_by: str | None = Field(default=None, max_length=100)

    model_config = ConfigDict(extra="forbid")


class LedgerTransactionResponse(BaseModel):
    id: str
    date: dt.date
    vendor: str
    amount: Decimal
    category: str
    context: str | None
    made_by: str | None
    bank_verified: bool
    bank_id: str | None
    source: str
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_domain(cls, tx: LedgerTransaction) -> "LedgerTransactionResponse":
        return cls(
            id=tx.id,
            date=tx.date,
            vendor=tx.vendor,
            amount=tx.amount,
            category=tx.category,
            context=tx.context,
            made_by=tx.made_by,
            bank_verified=tx.bank_verified,
            bank_id=tx.bank_id,
            source=tx.source.value,
            created_at=tx.created_at,
            updated_at=tx.updated_at,
        )
