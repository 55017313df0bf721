import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AgreementModel(Base, TimestampMixin):
    """Table ``agreements``. ``attachments`` is a JSON list of URLs."""

    __tablename__ = "agreements"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    client_name: Mapped[str] = mapped_column(String(255))
    scope_of_work: Mapped[str] = mapped_column(Text)
    value: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    status: Mapped[str] = mapped_column(String(20), default="active")
    effective_date: Mapped[dt.date] = mapped_column(Date)
    expiration_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    attachments: Mapped[list[str]] = mapped_column(JSON, default=list)
