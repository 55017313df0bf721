"""Client agreements of the current tenant."""

from fastapi import APIRouter, status

from tillbook.application.commands import (
    CreateAgreementCommand,
    DeleteAgreementCommand,
    UpdateAgreementCommand,
)
from tillbook.application.queries import ListAgreementsQuery
from tillbook.presentation.api.dependencies import OnboardedUser, RepoFactory
from tillbook.presentation.api.schemas.agreements import (
    AgreementCreate,
    AgreementResponse,
    AgreementUpdate,
)

router = APIRouter()


@router.get("", summary="List agreements")
async def list_agreements(
    _user: OnboardedUser,
    factory: RepoFactory,
) -> list[AgreementResponse]:
    agreements = await ListAgreementsQuery.from_factory(factory).execute()
    return [AgreementResponse.from_domain(a) for a in agreements]


@router.get(
    "/{agreement_id}",
    summary="Get an agreement",
    responses={404: {"description": "Agreement not found"}},
)
async def get_agreement(
    agreement_id: str,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> AgreementResponse:
    agreement = await ListAgreementsQuery.from_factory(factory).get(agreement_id)
    return AgreementResponse.from_domain(agreement)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an agreement")
async def create_agreement(
    request: AgreementCreate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> AgreementResponse:
    command = CreateAgreementCommand.from_factory(factory)
    agreement = await command.execute(**request.model_dump())
    await factory.session.commit()
    return AgreementResponse.from_domain(agreement)


@router.patch(
    "/{agreement_id}",
    summary="Update an agreement",
    responses={404: {"description": "Agreement not found"}},
)
async def update_agreement(
    agreement_id: str,
    request: AgreementUpdate,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> AgreementResponse:
    command = UpdateAgreementCommand.from_factory(factory)
    agreement = await command.execute(
        agreement_id,
        **request.model_dump(exclude_unset=True),
    )
    await factory.session.commit()
    return AgreementResponse.from_domain(agreement)


@router.delete(
    "/{agreement_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an agreement",
    responses={404: {"description": "Agreement not found"}},
)
async def delete_agreement(
    agreement_id: str,
    _user: OnboardedUser,
    factory: RepoFactory,
) -> None:
    await DeleteAgreementCommand.from_factory(factory).execute(agreement_id)
    await factory.session.commit()
