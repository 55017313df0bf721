from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """Table ``users``: identity plus the onboarding profile."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    role: Mapped[str] = mapped_column(String(20), default="user")
    full_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    company_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    onboarding_completed: Mapped[bool] = mapped_column(Boolean, default=False)
    tax_filing_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    business_category: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(2), nullable=True)
