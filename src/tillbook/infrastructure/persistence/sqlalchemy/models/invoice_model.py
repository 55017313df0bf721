import datetime as dt
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class InvoiceModel(Base, TimestampMixin):
    """Table ``invoices``. ``items`` holds the line items as JSON."""

    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    invoice_number: Mapped[str] = mapped_column(String(50))
    client_name: Mapped[str] = mapped_column(String(255))
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    status: Mapped[str] = mapped_column(String(20), default="pending")
    due_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    items: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSON, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
