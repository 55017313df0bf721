"""Client agreement schemas."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from tillbook.domain.records import Agreement, AgreementStatus


class AgreementCreate(BaseModel):
    client_name: str = Field(..., min_length=1, max_length=255)
    scope_of_work: str = Field(..., min_length=1)
    effective_date: dt.date
    value: Decimal = Field(default=Decimal(0), ge=0, decimal_places=2)
    status: AgreementStatus = AgreementStatus.ACTIVE
    expiration_date: dt.date | None = None
    notes: str | None = None
    attachments: list[str] = Field(default_factory=list)


class AgreementUpdate(BaseModel):
    """Partial update; omitted fields are left as they are."""

    client_name: str | None = Field(default=None, min_length=1, max_length=255)
    scope_of_work: str | None = Field(default=None, min_length=1)
    effective_date: dt.date | None = None
    value: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    status: AgreementStatus | None = None
    expiration_date: dt.date | None = None
    notes: str | None = None
    attachments: list[str] | None = None

    model_config = ConfigDict(extra="forbid")


class AgreementResponse(BaseModel):
    id: str
    client_name: str
    scope_of_work: str
    value: Decimal
    status: AgreementStatus
    effective_date: dt.date
    expiration_date: dt.date | None
    notes: str | None
    attachments: list[str]
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_domain(cls, agreement: Agreement) -> "AgreementResponse":
        return cls(
            id=agreement.id,
            client_name=agreement.client_name,
            scope_of_work=agreement.scope_of_work,
            value=agreement.value,
            status=agreement.status,
            effective_date=agreement.effective_date,
            expiration_date=agreement.expiration_date,
            notes=agreement.notes,
            attachments=agreement.attachments,
            created_at=agreement.created_at,
            updated_at=agreement.updated_at,
        )
