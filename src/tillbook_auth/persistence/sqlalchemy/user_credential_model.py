from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tillbook_auth.persistence.sqlalchemy.base import AuthBase


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


class UserCredentialModel(AuthBase):
    """One row per user holding the bcrypt hash and lockout state.

    ``user_id`` is deliberately not a foreign key so the auth tables can
    live next to any user table.
    """

    __tablename__ = "user_credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    failed_login_attempts: Mapped[int] = mapped_column(Integer, default=0)
    locked_until: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now,
        onupdate=_now,
    )

    def __repr__(self) -> str:
        return f"<UserCredentialModel(user_id={self.user_id})>"
