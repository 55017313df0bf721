"""Files and links a tenant keeps on record (logos, contracts, receipts)."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import UUID

from tillbook.domain.records.entities.tenant_record import TenantRecord
from tillbook.domain.shared.time import today_utc


class AssetCategory(str, Enum):
    BRANDING = "Branding"
    LEGAL = "Legal"
    MARKETING = "Marketing"
    INTERNAL = "Internal"
    FINANCIAL = "Financial"
    RECEIPT = "Receipt"
    TAX = "Tax"


class CompanyAsset(TenantRecord):
    """
    A stored document or link.

    ``asset_type`` is free text describing the file kind (``pdf``,
    ``image``, ``link``); ``category`` is one of ``AssetCategory``.
    """

    UPDATABLE = frozenset({"name", "asset_type", "url", "category", "date_added", "size"})

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: str,
        asset_type: str,
        url: str,
        category: AssetCategory | str = AssetCategory.INTERNAL,
        date_added: date | None = None,
        size: str | None = None,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        super().__init__(user_id, id=id, created_at=created_at, updated_at=updated_at)
        self._name = self._required_text(name, "Name")
        self._asset_type = self._required_text(asset_type, "Type")
        self._url = self._required_text(url, "URL")
        self._category = AssetCategory(category)
        self._date_added = date_added or today_utc()
        self._size = size

    @property
    def name(self) -> str:
        return self._name

    @property
    def asset_type(self) -> str:
        return self._asset_type

    @property
    def url(self) -> str:
        return self._url

    @property
    def category(self) -> AssetCategory:
        return self._category

    @property
    def date_added(self) -> date:
        return self._date_added

    @property
    def size(self) -> str | None:
        return self._size

    def _set_field(self, name: str, value: Any) -> None:
        if name in ("name", "asset_type", "url"):
            setattr(self, f"_{name}", self._required_text(value, name.replace("_", " ")))
        elif name == "category":
            self._category = AssetCategory(value)
        else:
            super()._set_field(name, value)
