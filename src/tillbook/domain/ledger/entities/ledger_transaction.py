"""Expense rows in a tenant's books."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from tillbook.domain.shared.exceptions import ErrorCode, ValidationError
from tillbook.domain.shared.time import utc_now

DEFAULT_CATEGORY = "Other Expenses"


class TransactionSource(str, Enum):
    MANUAL = "manual"
    PLAID = "plaid"


class LedgerTransaction:
    """
    One bookkeeping entry.

    Amounts are stored as positive expense values. Rows imported from a
    bank carry ``bank_id`` (the aggregator transaction id) and are marked
    ``bank_verified``.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        date: date,
        vendor: str,
        amount: Decimal,
        category: str = DEFAULT_CATEGORY,
        context: str | None = None,
        made_by: str | None = None,
        bank_verified: bool = False,
        bank_id: str | None = None,
        source: TransactionSource | str = TransactionSource.MANUAL,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or str(uuid4())
        self._user_id = user_id
        self._date = date
        self._vendor = self._clean_vendor(vendor)
        self._amount = self._clean_amount(amount)
        self._category = category or DEFAULT_CATEGORY
        self._context = context
        self._made_by = made_by
        self._bank_verified = bank_verified
        self._bank_id = bank_id
        self._source = TransactionSource(source)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _clean_vendor(vendor: str) -> str:
        vendor = (vendor or "").strip()
        if not vendor:
            raise ValidationError("Vendor cannot be empty")
        return vendor

    @staticmethod
    def _clean_amount(amount: Decimal) -> Decimal:
        amount = Decimal(str(amount))
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
    def date(self) -> date:
        return self._date

    @property
    def vendor(self) -> str:
        return self._vendor

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def category(self) -> str:
        return self._category

    @property
    def context(self) -> str | None:
        return self._context

    @property
    def made_by(self) -> str | None:
        return self._made_by

    @property
    def bank_verified(self) -> bool:
        return self._bank_verified

    @property
    def bank_id(self) -> str | None:
        return self._bank_id

    @property
    def source(self) -> TransactionSource:
        return self._source

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(self, **changes: object) -> None:
        """Apply a partial update. Keys mapped to ``None`` are ignored."""
        allowed = {"date", "vendor", "amount", "category", "context", "made_by"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Cannot update fields: {sorted(unknown)}")

        if changes.get("vendor") is not None:
            self._vendor = self._clean_vendor(changes["vendor"])  # type: ignore[arg-type]
        if changes.get("amount") is not None:
            self._amount = self._clean_amount(changes["amount"])  # type: ignore[arg-type]
        if changes.get("date") is not None:
            self._date = changes["date"]  # type: ignore[assignment]
        if changes.get("category") is not None:
            self._category = str(changes["category"]) or DEFAULT_CATEGORY
        if changes.get("context") is not None:
            self._context = str(changes["context"])
        if changes.get("made_by") is not None:
            self._made_by = str(changes["made_by"])
        self._updated_at = utc_now()

    def replace_bank_data(self, other: LedgerTransaction) -> None:
        """Take over a re-imported bank row; keeps id and creation time."""
        self._date = other.date
        self._vendor = other.vendor
        self._amount = other.amount
        self._category = other.category
        self._context = other.context
        self._bank_verified = other.bank_verified
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LedgerTransaction):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"LedgerTransaction(id={self._id!r}, date={self._date}, "
            f"vendor={self._vendor!r}, amount={self._amount})"
        )
