"""SQLAlchemy repositories against an in-memory SQLite database."""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tests.shared.fixtures.factories import FIXED_TIME, TestBankFactory, TestUserFactory
from tillbook.application.context import UserContext
from tillbook.domain.banking import ItemStatus
from tillbook.domain.ledger import DuplicateBankTransactionError, LedgerTransaction
from tillbook.domain.records import Agreement, AssetCategory, CompanyAsset, Invoice
from tillbook.domain.shared import today_utc
from tillbook.domain.user import EmailAlreadyExistsError
from tillbook.infrastructure.persistence.sqlalchemy import create_tables
from tillbook.infrastructure.persistence.sqlalchemy.adapters import (
    SqlAlchemyAdminReadAdapter,
)
from tillbook.infrastructure.persistence.sqlalchemy.models import LinkedItemModel
from tillbook.infrastructure.persistence.sqlalchemy.repositories import (
    AgreementRepositorySQLAlchemy,
    CompanyAssetRepositorySQLAlchemy,
    InvoiceRepositorySQLAlchemy,
    LedgerTransactionRepositorySQLAlchemy,
    LinkedItemRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from tillbook.infrastructure.security import FernetEncryptionService
from tillbook_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy

OWNER = TestUserFactory.default_context()
OTHER = UserContext(
    user_id=TestUserFactory.SECONDARY_ID,
    email=TestUserFactory.SECONDARY_EMAIL,
)


@pytest.fixture
async def session():
    """Create an in-memory SQLite session with all tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_tables(engine)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def encryption():
    return FernetEncryptionService(FernetEncryptionService.generate_key())


def _expense(
    context: UserContext,
    day: date,
    amount: str,
    bank_id: str | None = None,
) -> LedgerTransaction:
    return LedgerTransaction(
        user_id=context.user_id,
        date=day,
        vendor="Uber",
        amount=Decimal(amount),
        category="Travel",
        bank_id=bank_id,
        bank_verified=bank_id is not None,
        source="plaid" if bank_id else "manual",
    )


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, session):
        repo = UserRepositorySQLAlchemy(session)
        user = TestUserFactory.onboarded_user()

        await repo.save(user)

        found = await repo.find_by_email("OWNER@example.com")
        assert found is not None
        assert found.id == user.id
        assert found.company_name == "Acme LLC"
        assert found.onboarding_completed

    @pytest.mark.asyncio
    async def test_duplicate_email(self, session):
        repo = UserRepositorySQLAlchemy(session)
        await repo.save(TestUserFactory.user())

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(TestUserFactory.user(id=TestUserFactory.SECONDARY_ID))

    @pytest.mark.asyncio
    async def test_delete_with_all_data(self, session, encryption):
        users = UserRepositorySQLAlchemy(session)
        await users.save(TestUserFactory.user())
        items = LinkedItemRepositorySQLAlchemy(session, OWNER, encryption)
        ledger = LedgerTransactionRepositorySQLAlchemy(session, OWNER)
        await items.save(TestBankFactory.linked_item())
        await ledger.save(_expense(OWNER, date(2024, 3, 1), "12.50"))
        invoices = InvoiceRepositorySQLAlchemy(session, OWNER)
        await invoices.save(Invoice(user_id=OWNER.user_id, client_name="Acme Corp"))

        await users.delete_with_all_data(OWNER.user_id)

        assert await users.find_by_id(OWNER.user_id) is None
        assert await items.find_by_item_id("item-1") is None
        assert await ledger.count() == 0
        assert await invoices.find_all() == []


class TestLinkedItemRepository:
    @pytest.mark.asyncio
    async def test_access_token_is_encrypted_at_rest(self, session, encryption):
        repo = LinkedItemRepositorySQLAlchemy(session, OWNER, encryption)
        item = TestBankFactory.linked_item()

        await repo.save(item)

        stored = (await session.execute(select(LinkedItemModel))).scalar_one()
        assert item.access_token.encode() not in stored.access_token_encrypted
        found = await repo.find_by_item_id(item.item_id)
        assert found.access_token == item.access_token
        assert found.accounts[0].account_id == "acc-checking"

    @pytest.mark.asyncio
    async def test_items_are_scoped_to_the_tenant(self, session, encryption):
        await LinkedItemRepositorySQLAlchemy(session, OWNER, encryption).save(
            TestBankFactory.linked_item(),
        )

        other = LinkedItemRepositorySQLAlchemy(session, OTHER, encryption)

        assert await other.find_by_item_id("item-1") is None
        assert await other.find_active() == []

    @pytest.mark.asyncio
    async def test_same_item_id_in_two_tenants(self, session, encryption):
        owner = LinkedItemRepositorySQLAlchemy(session, OWNER, encryption)
        await owner.save(TestBankFactory.linked_item())
        other = LinkedItemRepositorySQLAlchemy(session, OTHER, encryption)

        await other.save(TestBankFactory.linked_item(user_id=OTHER.user_id))

        found = await other.find_by_item_id("item-1")
        assert found.user_id == OTHER.user_id
        assert [i.item_id for i in await owner.find_active()] == ["item-1"]

    @pytest.mark.asyncio
    async def test_find_active_skips_removed_items(self, session, encryption):
        repo = LinkedItemRepositorySQLAlchemy(session, OWNER, encryption)
        removed = TestBankFactory.linked_item("item-old")
        removed.mark_removed()
        await repo.save(removed)
        await repo.save(TestBankFactory.linked_item("item-new"))

        active = await repo.find_active()

        assert [i.item_id for i in active] == ["item-new"]
        old = await repo.find_by_item_id("item-old")
        assert old.status is ItemStatus.REMOVED

    @pytest.mark.asyncio
    async def test_save_updates_cursor(self, session, encryption):
        repo = LinkedItemRepositorySQLAlchemy(session, OWNER, encryption)
        item = TestBankFactory.linked_item()
        await repo.save(item)

        item.advance_cursor("cursor-2")
        await repo.save(item)

        found = await repo.find_by_item_id("item-1")
        assert found.transactions_cursor == "cursor-2"
        assert found.status is ItemStatus.ACTIVE


class TestLedgerTransactionRepository:
    @pytest.mark.asyncio
    async def test_find_all_is_newest_first_and_scoped(self, session):
        repo = LedgerTransactionRepositorySQLAlchemy(session, OWNER)
        await repo.save(_expense(OWNER, date(2024, 3, 1), "10.00"))
        await repo.save(_expense(OWNER, date(2024, 3, 9), "20.00"))
        await LedgerTransactionRepositorySQLAlchemy(session, OTHER).save(
            _expense(OTHER, date(2024, 3, 5), "99.00"),
        )

        found = await repo.find_all()

        assert [t.date for t in found] == [date(2024, 3, 9), date(2024, 3, 1)]
        assert found[0].amount == Decimal("20.00")
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_bank_id_lookup_and_delete(self, session):
        repo = LedgerTransactionRepositorySQLAlchemy(session, OWNER)
        await repo.save(_expense(OWNER, date(2024, 3, 1), "12.50", bank_id="tx-1"))

        found = await repo.find_by_bank_id("tx-1")
        assert found.bank_verified
        assert found.source.value == "plaid"

        assert await repo.delete_by_bank_id("tx-1")
        assert not await repo.delete_by_bank_id("tx-1")
        assert await repo.find_by_bank_id("tx-1") is None

    @pytest.mark.asyncio
    async def test_duplicate_bank_id_is_a_conflict(self, session):
        repo = LedgerTransactionRepositorySQLAlchemy(session, OWNER)
        await repo.save(_expense(OWNER, date(2024, 3, 1), "12.50", bank_id="tx-1"))

        with pytest.raises(DuplicateBankTransactionError):
            await repo.save(_expense(OWNER, date(2024, 3, 2), "12.50", bank_id="tx-1"))

    @pytest.mark.asyncio
    async def test_other_tenant_cannot_delete(self, session):
        owned = _expense(OWNER, date(2024, 3, 1), "12.50")
        await LedgerTransactionRepositorySQLAlchemy(session, OWNER).save(owned)

        other = LedgerTransactionRepositorySQLAlchemy(session, OTHER)

        assert await other.find_by_id(owned.id) is None
        assert not await other.delete(owned.id)


class TestRecordRepositories:
    @pytest.mark.asyncio
    async def test_invoices_newest_created_first_and_scoped(self, session):
        repo = InvoiceRepositorySQLAlchemy(session, OWNER)
        older = Invoice(user_id=OWNER.user_id, client_name="Acme Corp", created_at=FIXED_TIME)
        newer = Invoice(
            user_id=OWNER.user_id,
            client_name="Globex",
            created_at=FIXED_TIME + timedelta(days=1),
            items=[{"description": "Audit", "quantity": 1, "rate": 500}],
        )
        await repo.save(older)
        await repo.save(newer)
        await InvoiceRepositorySQLAlchemy(session, OTHER).save(
            Invoice(user_id=OTHER.user_id, client_name="Initech"),
        )

        found = await repo.find_all()

        assert [i.client_name for i in found] == ["Globex", "Acme Corp"]
        assert found[0].items == [{"description": "Audit", "quantity": 1, "rate": 500}]
        assert found[1].invoice_number == older.invoice_number
        assert found[1].created_at == FIXED_TIME

    @pytest.mark.asyncio
    async def test_other_tenant_cannot_read_or_delete(self, session):
        asset = CompanyAsset(
            user_id=OWNER.user_id,
            name="Logo",
            asset_type="image",
            url="https://cdn.example.com/logo.svg",
            category=AssetCategory.BRANDING,
        )
        await CompanyAssetRepositorySQLAlchemy(session, OWNER).save(asset)

        other = CompanyAssetRepositorySQLAlchemy(session, OTHER)

        assert await other.find_by_id(asset.id) is None
        assert not await other.delete(asset.id)
        assert await other.find_all() == []

    @pytest.mark.asyncio
    async def test_agreement_update_round_trip(self, session):
        repo = AgreementRepositorySQLAlchemy(session, OWNER)
        agreement = Agreement(
            user_id=OWNER.user_id,
            client_name="Acme Corp",
            scope_of_work="Monthly bookkeeping",
            effective_date=date(2024, 1, 1),
            value=Decimal("1500.00"),
        )
        await repo.save(agreement)

        agreement.update(
            attachments=["https://files.example.com/msa.pdf"],
            expiration_date=date(2024, 12, 31),
        )
        await repo.save(agreement)

        found = await repo.find_by_id(agreement.id)
        assert found.attachments == ["https://files.example.com/msa.pdf"]
        assert found.expiration_date == date(2024, 12, 31)
        assert found.value == Decimal("1500.00")
        assert await repo.delete(agreement.id)
        assert await repo.find_by_id(agreement.id) is None


class TestAdminReadAdapter:
    @pytest.mark.asyncio
    async def test_stats_across_tenants(self, session):
        users = UserRepositorySQLAlchemy(session)
        await users.save(TestUserFactory.onboarded_user())
        await users.save(TestUserFactory.admin())
        await users.save(
            TestUserFactory.user(
                id=TestUserFactory.SECONDARY_ID,
                email=TestUserFactory.SECONDARY_EMAIL,
            ),
        )
        await LedgerTransactionRepositorySQLAlchemy(session, OWNER).save(
            _expense(OWNER, date(2024, 3, 1), "100.25"),
        )
        await LedgerTransactionRepositorySQLAlchemy(session, OWNER).save(
            _expense(OWNER, date(2024, 3, 2), "50.00"),
        )
        await LedgerTransactionRepositorySQLAlchemy(session, OTHER).save(
            _expense(OTHER, date(2024, 3, 3), "49.75"),
        )
        adapter = SqlAlchemyAdminReadAdapter(session)

        user_stats = await adapter.user_stats(today_utc())
        aggregate = await adapter.aggregate_stats()
        activity = await adapter.activity_by_user()

        assert user_stats.total_users == 3
        assert user_stats.onboarded_users == 1
        assert user_stats.active_today == 1
        assert user_stats.team_members == 1
        assert aggregate.total_transactions == 3
        assert aggregate.total_expenses == Decimal("200.00")
        assert aggregate.avg_expense_per_user == Decimal("100.00")
        assert aggregate.total_revenue == Decimal("0")
        assert activity[OWNER.user_id].total_expenses == Decimal("150.25")
        assert TestUserFactory.ADMIN_ID not in activity

    @pytest.mark.asyncio
    async def test_empty_database(self, session):
        aggregate = await SqlAlchemyAdminReadAdapter(session).aggregate_stats()

        assert aggregate.total_transactions == 0
        assert aggregate.avg_expense_per_user == Decimal("0")


class TestUserCredentialRepository:
    @pytest.mark.asyncio
    async def test_locks_after_repeated_failures(self, session):
        repo = UserCredentialRepositorySQLAlchemy(session)
        await repo.save(OWNER.user_id, "hash")

        for _ in range(4):
            record = await repo.record_failed_attempt(OWNER.user_id)
            assert not record.is_locked()

        record = await repo.record_failed_attempt(OWNER.user_id)

        assert record.failed_login_attempts == 5
        assert record.is_locked()

    @pytest.mark.asyncio
    async def test_successful_login_resets_counter(self, session):
        repo = UserCredentialRepositorySQLAlchemy(session)
        await repo.save(OWNER.user_id, "hash")
        await repo.record_failed_attempt(OWNER.user_id)

        await repo.record_successful_login(OWNER.user_id)

        record = await repo.find_by_user_id(OWNER.user_id)
        assert record.failed_login_attempts == 0
        assert record.locked_until is None
        assert record.last_login_at is not None

    @pytest.mark.asyncio
    async def test_unknown_user(self, session):
        repo = UserCredentialRepositorySQLAlchemy(session)

        assert await repo.record_failed_attempt(OWNER.user_id) is None
        assert not await repo.delete(OWNER.user_id)
