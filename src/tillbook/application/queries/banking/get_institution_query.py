from __future__ import annotations

from typing import TYPE_CHECKING

from tillbook.domain.banking import InstitutionNotFoundError

if TYPE_CHECKING:
    from tillbook.domain.banking.ports import BankDataAggregatorPort
    from tillbook.domain.banking.value_objects import Institution


class GetInstitutionQuery:
    def __init__(self, aggregator: BankDataAggregatorPort):
        self._aggregator = aggregator

    async def execute(self, institution_id: str) -> Institution:
        institution = await self._aggregator.get_institution(institution_id)
        if institution is None:
            raise InstitutionNotFoundError(institution_id)
        return institution
