"""Unit tests for the invoice, company asset and agreement commands."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from tests.shared.fixtures.factories import TestUserFactory
from tillbook.application.commands import (
    CreateAgreementCommand,
    CreateCompanyAssetCommand,
    CreateInvoiceCommand,
    DeleteAgreementCommand,
    DeleteCompanyAssetCommand,
    DeleteInvoiceCommand,
    UpdateAgreementCommand,
    UpdateInvoiceCommand,
)
from tillbook.domain.records import (
    AgreementNotFoundError,
    AgreementStatus,
    AssetCategory,
    CompanyAssetNotFoundError,
    Invoice,
    InvoiceNotFoundError,
    InvoiceStatus,
)
from tillbook.domain.shared import ErrorCode, ValidationError


class TestCreateInvoiceCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.command = CreateInvoiceCommand(self.repo, TestUserFactory.default_context())

    @pytest.mark.asyncio
    async def test_defaults(self):
        invoice = await self.command.execute(client_name="Acme Corp")

        assert invoice.user_id == TestUserFactory.DEFAULT_ID
        assert invoice.status is InvoiceStatus.PENDING
        assert invoice.amount == Decimal(0)
        assert invoice.invoice_number.startswith("INV-")
        assert invoice.items is None
        self.repo.save.assert_awaited_once_with(invoice)

    @pytest.mark.asyncio
    async def test_explicit_values_win(self):
        invoice = await self.command.execute(
            client_name="Acme Corp",
            amount=Decimal("1200.00"),
            invoice_number="2024-007",
            status="sent",
            items=[{"description": "Consulting", "quantity": 8}],
        )

        assert invoice.invoice_number == "2024-007"
        assert invoice.status is InvoiceStatus.SENT
        assert invoice.items == [{"description": "Consulting", "quantity": 8}]


class TestCreateCompanyAssetCommand:
    @pytest.mark.asyncio
    async def test_defaults(self):
        repo = AsyncMock()
        command = CreateCompanyAssetCommand(repo, TestUserFactory.default_context())

        asset = await command.execute(
            name="Logo",
            asset_type="image",
            url="https://cdn.example.com/logo.svg",
        )

        assert asset.category is AssetCategory.INTERNAL
        assert asset.date_added is not None
        assert asset.size is None
        repo.save.assert_awaited_once_with(asset)


class TestCreateAgreementCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.command = CreateAgreementCommand(self.repo, TestUserFactory.default_context())

    @pytest.mark.asyncio
    async def test_defaults(self):
        agreement = await self.command.execute(
            client_name="Acme Corp",
            scope_of_work="Monthly bookkeeping",
            effective_date=date(2024, 1, 1),
        )

        assert agreement.status is AgreementStatus.ACTIVE
        assert agreement.value == Decimal(0)
        assert agreement.attachments == []
        self.repo.save.assert_awaited_once_with(agreement)

    @pytest.mark.asyncio
    async def test_expiration_before_effective_date(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.command.execute(
                client_name="Acme Corp",
                scope_of_work="Monthly bookkeeping",
                effective_date=date(2024, 6, 1),
                expiration_date=date(2024, 1, 1),
            )

        assert exc_info.value.code is ErrorCode.INVALID_DATE_RANGE
        self.repo.save.assert_not_awaited()


class TestUpdateRecordCommands:
    def setup_method(self):
        self.repo = AsyncMock()

    @pytest.mark.asyncio
    async def test_update_invoice(self):
        invoice = Invoice(user_id=TestUserFactory.DEFAULT_ID, client_name="Acme Corp")
        self.repo.find_by_id.return_value = invoice

        result = await UpdateInvoiceCommand(self.repo).execute(invoice.id, status="paid")

        assert result.status is InvoiceStatus.PAID
        self.repo.save.assert_awaited_once_with(invoice)

    @pytest.mark.asyncio
    async def test_update_unknown_invoice(self):
        self.repo.find_by_id.return_value = None

        with pytest.raises(InvoiceNotFoundError) as exc_info:
            await UpdateInvoiceCommand(self.repo).execute("missing", notes="x")

        assert exc_info.value.code is ErrorCode.INVOICE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_unknown_agreement(self):
        self.repo.find_by_id.return_value = None

        with pytest.raises(AgreementNotFoundError):
            await UpdateAgreementCommand(self.repo).execute("missing", notes="x")


class TestDeleteRecordCommands:
    @pytest.mark.parametrize(
        ("command_cls", "error"),
        [
            (DeleteInvoiceCommand, InvoiceNotFoundError),
            (DeleteCompanyAssetCommand, CompanyAssetNotFoundError),
            (DeleteAgreementCommand, AgreementNotFoundError),
        ],
    )
    @pytest.mark.asyncio
    async def test_unknown_record(self, command_cls, error):
        repo = AsyncMock()
        repo.delete.return_value = False

        with pytest.raises(error):
            await command_cls(repo).execute("missing")

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = AsyncMock()
        repo.delete.return_value = True

        await DeleteInvoiceCommand(repo).execute("inv-1")

        repo.delete.assert_awaited_once_with("inv-1")
