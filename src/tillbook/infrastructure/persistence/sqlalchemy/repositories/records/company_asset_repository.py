from __future__ import annotations

from tillbook.domain.records import CompanyAsset, CompanyAssetRepository
from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.infrastructure.persistence.sqlalchemy.models import CompanyAssetModel
from tillbook.infrastructure.persistence.sqlalchemy.repositories.records.record_repository import (  # NOQA: E501
    RecordRepositorySQLAlchemy,
)


class CompanyAssetRepositorySQLAlchemy(
    RecordRepositorySQLAlchemy[CompanyAsset],
    CompanyAssetRepository,
):
    model = CompanyAssetModel

    @staticmethod
    def _copy_to_model(record: CompanyAsset, model: CompanyAssetModel) -> None:
        model.name = record.name
        model.asset_type = record.asset_type
        model.url = record.url
        model.category = record.category.value
        model.date_added = record.date_added
        model.size = record.size

    @staticmethod
    def _map_to_domain(model: CompanyAssetModel) -> CompanyAsset:
        return CompanyAsset(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            asset_type=model.asset_type,
            url=model.url,
            category=model.category,
            date_added=model.date_added,
            size=model.size,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
