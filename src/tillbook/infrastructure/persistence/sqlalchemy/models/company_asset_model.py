import datetime as dt
from typing import Optional
from uuid import UUID

from sqlalchemy import Date, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CompanyAssetModel(Base, TimestampMixin):
    """Table ``company_assets``."""

    __tablename__ = "company_assets"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255))
    asset_type: Mapped[str] = mapped_column(String(50))
    url: Mapped[str] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String(30), default="Internal")
    date_added: Mapped[dt.date] = mapped_column(Date)
    size: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
