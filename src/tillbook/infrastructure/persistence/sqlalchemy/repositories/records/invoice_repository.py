from __future__ import annotations

from decimal import Decimal

from tillbook.domain.records import Invoice, InvoiceRepository
from tillbook.domain.shared.time import ensure_tz_aware
from tillbook.infrastructure.persistence.sqlalchemy.models import InvoiceModel
from tillbook.infrastructure.persistence.sqlalchemy.repositories.records.record_repository import (  # NOQA: E501
    RecordRepositorySQLAlchemy,
)


class InvoiceRepositorySQLAlchemy(RecordRepositorySQLAlchemy[Invoice], InvoiceRepository):
    model = InvoiceModel

    @staticmethod
    def _copy_to_model(record: Invoice, model: InvoiceModel) -> None:
        model.invoice_number = record.invoice_number
        model.client_name = record.client_name
        model.amount = record.amount
        model.status = record.status.value
        model.due_date = record.due_date
        model.items = record.items
        model.notes = record.notes

    @staticmethod
    def _map_to_domain(model: InvoiceModel) -> Invoice:
        return Invoice(
            id=model.id,
            user_id=model.user_id,
            invoice_number=model.invoice_number,
            client_name=model.client_name,
            amount=Decimal(str(model.amount)),
            status=model.status,
            due_date=model.due_date,
            items=model.items,
            notes=model.notes,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
