"""A bank connection (aggregator "item") owned by one tenant."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from tillbook.domain.banking.value_objects import LinkedAccount
from tillbook.domain.shared.time import utc_now


class ItemStatus(str, Enum):
    ACTIVE = "active"
    LOGIN_REQUIRED = "login_required"
    REMOVED = "removed"


class LinkedItem:
    """
    One aggregator item: a login at one institution, covering one or more
    accounts.

    The access token is held in plain text only in memory; repositories
    encrypt it at rest. ``accounts`` is a snapshot without balances used
    when the aggregator is unavailable.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        item_id: str,
        access_token: str,
        institution_id: str | None = None,
        institution_name: str | None = None,
        accounts: list[LinkedAccount] | None = None,
        status: ItemStatus | str = ItemStatus.ACTIVE,
        transactions_cursor: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._item_id = item_id
        self._access_token = access_token
        self._institution_id = institution_id
        self._institution_name = institution_name
        self._accounts = [a.without_balances() for a in accounts or []]
        self._status = ItemStatus(status)
        self._transactions_cursor = transactions_cursor
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def item_id(self) -> str:
        return self._item_id

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def institution_id(self) -> str | None:
        return self._institution_id

    @property
    def institution_name(self) -> str | None:
        return self._institution_name

    @property
    def accounts(self) -> list[LinkedAccount]:
        return list(self._accounts)

    @property
    def status(self) -> ItemStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == ItemStatus.ACTIVE

    @property
    def transactions_cursor(self) -> str | None:
        return self._transactions_cursor

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def relink(
        self,
        access_token: str,
        institution_id: str | None,
        institution_name: str | None,
        accounts: list[LinkedAccount],
    ) -> None:
        """Refresh the connection after the user went through the link flow again."""
        self._access_token = access_token
        self._institution_id = institution_id or self._institution_id
        self._institution_name = institution_name or self._institution_name
        self._accounts = [a.without_balances() for a in accounts]
        self._status = ItemStatus.ACTIVE
        self._touch()

    def advance_cursor(self, cursor: str) -> None:
        self._transactions_cursor = cursor
        self._touch()

    def mark_login_required(self) -> None:
        self._status = ItemStatus.LOGIN_REQUIRED
        self._touch()

    def mark_removed(self) -> None:
        self._status = ItemStatus.REMOVED
        self._transactions_cursor = None
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedItem):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"LinkedItem(item_id={self._item_id!r}, "
            f"institution={self._institution_name!r}, status={self._status.value})"
        )
