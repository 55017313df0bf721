from typing import Any, Optional
from uuid import UUID

from sqlalchemy import ForeignKey, LargeBinary, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from tillbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class LinkedItemModel(Base, TimestampMixin):
    """
    Table ``linked_items``: one row per aggregator item and tenant.

    ``access_token_encrypted`` holds the Fernet ciphertext; ``accounts`` is
    the JSON account snapshot (no balances).
    """

    __tablename__ = "linked_items"
    __table_args__ = (
        UniqueConstraint("user_id", "item_id", name="uq_linked_item_user_item_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    item_id: Mapped[str] = mapped_column(String(255), index=True)
    access_token_encrypted: Mapped[bytes] = mapped_column(LargeBinary)
    institution_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    institution_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    accounts: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    status: Mapped[str] = mapped_column(String(20), default="active", index=True)
    transactions_cursor: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
