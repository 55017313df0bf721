from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from tillbook.domain.records import AssetCategory, CompanyAsset

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.records import CompanyAssetRepository


class CreateCompanyAssetCommand:
    def __init__(
        self,
        asset_repository: CompanyAssetRepository,
        user_context: UserContext,
    ):
        self._asset_repo = asset_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCompanyAssetCommand:
        return cls(
            asset_repository=factory.company_asset_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        asset_type: str,
        url: str,
        category: AssetCategory | str = AssetCategory.INTERNAL,
        date_added: date | None = None,
        size: str | None = None,
    ) -> CompanyAsset:
        asset = CompanyAsset(
            user_id=self._user_context.user_id,
            name=name,
            asset_type=asset_type,
            url=url,
            category=category,
            date_added=date_added,
            size=size,
        )
        await self._asset_repo.save(asset)
        return asset
