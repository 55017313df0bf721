"""Client agreements: scope of work, value and term."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from tillbook.domain.records.entities.tenant_record import TenantRecord
from tillbook.domain.shared.exceptions import ErrorCode, ValidationError


class AgreementStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    EXPIRED = "expired"
    TERMINATED = "terminated"


class Agreement(TenantRecord):
    UPDATABLE = frozenset(
        {
            "client_name",
            "scope_of_work",
            "value",
            "status",
            "effective_date",
            "expiration_date",
            "notes",
            "attachments",
        },
    )

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        client_name: str,
        scope_of_work: str,
        effective_date: date,
        value: Decimal | int | str = 0,
        status: AgreementStatus | str = AgreementStatus.ACTIVE,
        expiration_date: date | None = None,
        notes: str | None = None,
        attachments: list[str] | None = None,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        super().__init__(user_id, id=id, created_at=created_at, updated_at=updated_at)
        self._client_name = self._required_text(client_name, "Client name")
        self._scope_of_work = self._required_text(scope_of_work, "Scope of work")
        self._value = self._money(value)
        self._status = AgreementStatus(status)
        self._effective_date = effective_date
        self._expiration_date = expiration_date
        self._notes = notes
        self._attachments = list(attachments or [])
        self._validate()

    @property
    def client_name(self) -> str:
        return self._client_name

    @property
    def scope_of_work(self) -> str:
        return self._scope_of_work

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def status(self) -> AgreementStatus:
        return self._status

    @property
    def effective_date(self) -> date:
        return self._effective_date

    @property
    def expiration_date(self) -> date | None:
        return self._expiration_date

    @property
    def notes(self) -> str | None:
        return self._notes

    @property
    def attachments(self) -> list[str]:
        return list(self._attachments)

    def _set_field(self, name: str, value: Any) -> None:
        if name in ("client_name", "scope_of_work"):
            setattr(self, f"_{name}", self._required_text(value, name.replace("_", " ")))
        elif name == "value":
            self._value = self._money(value)
        elif name == "status":
            self._status = AgreementStatus(value)
        elif name == "attachments":
            self._attachments = list(value)
        else:
            super()._set_field(name, value)

    def _validate(self) -> None:
        if self._expiration_date and self._expiration_date < self._effective_date:
            raise ValidationError(
                "Expiration date cannot be before the effective date",
                code=ErrorCode.INVALID_DATE_RANGE,
            )
