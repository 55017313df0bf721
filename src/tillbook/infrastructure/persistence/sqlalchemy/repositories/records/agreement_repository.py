from __future__ import annotations

from decimal import Decimal

from tillbook.domain.records import Agreement, AgreementRepository
from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.infrastructure.persistence.sqlalchemy.models import AgreementModel
from tillbook.infrastructure.persistence.sqlalchemy.repositories.records.record_repository import (  # NOQA: E501
    RecordRepositorySQLAlchemy,
)


class AgreementRepositorySQLAlchemy(
    RecordRepositorySQLAlchemy[Agreement],
    AgreementRepository,
):
    model = AgreementModel

    @staticmethod
    def _copy_to_model(record: Agreement, model: AgreementModel) -> None:
        model.client_name = record.client_name
        model.scope_of_work = record.scope_of_work
        model.value = record.value
        model.status = record.status.value
        model.effective_date = record.effective_date
        model.expiration_date = record.expiration_date
        model.notes = record.notes
        model.attachments = record.attachments

    @staticmethod
    def _map_to_domain(model: AgreementModel) -> Agreement:
        return Agreement(
            id=model.id,
            user_id=model.user_id,
            client_name=model.client_name,
            scope_of_work=model.scope_of_work,
            value=Decimal(str(model.value)),
            status=model.status,
            effective_date=model.effective_date,
            expiration_date=model.expiration_date,
            notes=model.notes,
            attachments=model.attachments or [],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
