"""Base class for the simple business records a tenant keeps."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar
from uuid import UUID, uuid4

from tillbook.domain.shared.exceptions import ErrorCode, ValidationError
from tillbook.domain.shared.time import utc_now


class TenantRecord:
    """
    Identity, ownership and timestamps shared by invoices, company assets
    and agreements.

    Subclasses list their editable fields in ``UPDATABLE`` and may hook
    field normalisation into ``_set_field``.
    """

    UPDATABLE: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        user_id: UUID,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or str(uuid4())
        self._user_id = user_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _required_text(value: str | None, label: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValidationError(f"{label} cannot be empty")
        return value

    @staticmethod
    def _money(value: Decimal | int | float | str | None) -> Decimal:
        amount = Decimal(str(value if value is not None else 0))
        if amount < 0:
            raise ValidationError(
                "Amount must not be negative",
                code=ErrorCode.INVALID_AMOUNT,
            )
        return amount

    @property
    def id(self) -> str:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(self, **changes: Any) -> None:
        """Apply a partial update. Keys mapped to ``None`` are ignored."""
        unknown = set(changes) - self.UPDATABLE
        if unknown:
            raise ValidationError(f"Cannot update fields: {sorted(unknown)}")

        for name, value in changes.items():
            if value is not None:
                self._set_field(name, value)
        self._validate()
        self._updated_at = utc_now()

    def _set_field(self, name: str, value: Any) -> None:
        setattr(self, f"_{name}", value)

    def _validate(self) -> None:
        """Cross-field checks, run after construction and every update."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TenantRecord) or type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
