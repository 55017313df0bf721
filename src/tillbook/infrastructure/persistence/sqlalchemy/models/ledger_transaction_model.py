import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class LedgerTransactionModel(Base, TimestampMixin):
    """Table ``ledger_transactions``. ``bank_id`` is unique per tenant."""

    __tablename__ = "ledger_transactions"
    __table_args__ = (
        UniqueConstraint("user_id", "bank_id", name="uq_ledger_user_bank_id"),
    )

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    vendor: Mapped[str] = mapped_column(String(255))
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    category: Mapped[str] = mapped_column(String(100))
    context: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    made_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    bank_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    bank_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    source: Mapped[str] = mapped_column(String(20), default="manual")
