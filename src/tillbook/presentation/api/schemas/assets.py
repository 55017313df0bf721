"""Company asset schemas. The asset kind is exposed as ``type``."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from tillbook.domain.records import AssetCategory, CompanyAsset


class CompanyAssetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    asset_type: str = Field(..., alias="type", min_length=1, max_length=50)
    url: str = Field(..., min_length=1)
    category: AssetCategory = AssetCategory.INTERNAL
    date_added: dt.date | None = None
    size: str | None = Field(default=None, max_length=50)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Logo",
                "type": "image",
                "url": "https://cdn.example.com/logo.svg",
                "category": "Branding",
            },
        },
    )


class CompanyAssetUpdate(BaseModel):
    """Partial update; omitted fields are left as they are."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    asset_type: str | None = Field(default=None, alias="type", min_length=1, max_length=50)
    url: str | None = Field(default=None, min_length=1)
    category: AssetCategory | None = None
    date_added: dt.date | None = None
    size: str | None = Field(default=None, max_length=50)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class CompanyAssetResponse(BaseModel):
    id: str
    name: str
    asset_type: str = Field(alias="type")
    url: str
    category: AssetCategory
    date_added: dt.date
    size: str | None
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, asset: CompanyAsset) -> "CompanyAssetResponse":
        return cls(
            id=asset.id,
            name=asset.name,
            asset_type=asset.asset_type,
            url=asset.url,
            category=asset.category,
            date_added=asset.date_added,
            size=asset.size,
            created_at=asset.created_at,
            updated_at=asset.updated_at,
        )
