"""Company assets: logos, contracts and other documents on file."""

from fastapi import APIRouter, status

from tillbook.application.commands import (
    CreateCompanyAssetCommand,
    DeleteCompanyAssetCommand,
    UpdateCompanyAssetCommand,
)
from tillbook.application.queries import ListCompanyAssetsQuery
from tillbook.presentation.api.dependencies import OnboardedUser, RepoFactory
from tillbook.presentation.api.schemas.assets import (
    CompanyAssetCreate,
    CompanyAssetResponse,
    CompanyAssetUpdate,
)

router = APIRouter()


@router.get("", summary="List company assets")
async def list_assets(
    _user: OnboardedUser,
    factory: RepoFactory,
) -> list[CompanyAssetResponse]:
    assets = await ListCompanyAssetsQuery.from_factory(factory).execute()
    return [CompanyAssetResponse.from_domain(a) for a in assets]


@router.get(
    "/{asset_id}",
    summary="Get a company asset",
    responses={404: {"description": "Asset not found"}},
)
async def get_asset(
    asset_id: str,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> CompanyAssetResponse:
    asset = await ListCompanyAssetsQuery.from_factory(factory).get(asset_id)
    return CompanyAssetResponse.from_domain(asset)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Add a company asset")
async def create_asset(
    request: CompanyAssetCreate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> CompanyAssetResponse:
    command = CreateCompanyAssetCommand.from_factory(factory)
    asset = await command.execute(**request.model_dump())
    await factory.session.commit()
    return CompanyAssetResponse.from_domain(asset)


@router.patch(
    "/{asset_id}",
    summary="Update a company asset",
    responses={404: {"description": "Asset not found"}},
)
async def update_asset(
    asset_id: str,
    request: CompanyAssetUpdate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> CompanyAssetResponse:
    command = UpdateCompanyAssetCommand.from_factory(factory)
    asset = await command.execute(asset_id, **request.model_dump(exclude_unset=True))
    await factory.session.commit()
    return CompanyAssetResponse.from_domain(asset)


@router.delete(
    "/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a company asset",
    responses={404: {"description": "Asset not found"}},
)
async def delete_asset(asset_id: str, _user: OnboardedUser, factory: RepoFactory) -> None:
    await DeleteCompanyAssetCommand.from_factory(factory).execute(asset_id)
    await factory.session.commit()
