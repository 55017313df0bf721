from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from tillbook.domain.records import Agreement, AgreementStatus

if TYPE_CHECKING:
    from tillbook.application.context import UserContext
    from tillbook.application.factories import RepositoryFactory
    from tillbook.domain.records import AgreementRepository


class CreateAgreementCommand:
    def __init__(
        self,
        agreement_repository: AgreementRepository,
        user_context: UserContext,
    ):
        self._agreement_repo = agreement_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateAgreementCommand:
        return cls(
            agreement_repository=factory.agreement_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        client_name: str,
        scope_of_work: str,
        effective_date: date,
        value: Decimal = Decimal(0),
        status: AgreementStatus | str | None = None,
        expiration_date: date | None = None,
        notes: str | None = None,
        attachments: list[str] | None = None,
    ) -> Agreement:
        agreement = Agreement(
            user_id=self._user_context.user_id,
            client_name=client_name,
            scope_of_work=scope_of_work,
            effective_date=effective_date,
            value=value,
            status=status or AgreementStatus.ACTIVE,
            expiration_date=expiration_date,
            notes=notes,
            attachments=attachments,
        )
        await self._agreement_repo.save(agreement)
        return agreement
