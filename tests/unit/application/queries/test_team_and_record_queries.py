"""Unit tests for the team directory and the record listing queries."""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from tests.shared.fixtures.factories import TestUserFactory
from tillbook.application.queries import (
    ListAgreementsQuery,
    ListCompanyAssetsQuery,
    ListInvoicesQuery,
    ListTeamMembersQuery,
)
from tillbook.domain.records import (
    AgreementNotFoundError,
    CompanyAssetNotFoundError,
    Invoice,
    InvoiceNotFoundError,
)
from tillbook.domain.user import TeamMembershipPolicy, UserRole


class TestListTeamMembersQuery:
    @pytest.mark.asyncio
    async def test_members_by_role_and_email_sorted_by_name(self):
        user_repo = AsyncMock()
        user_repo.list_all.return_value = [
            TestUserFactory.user(),
            TestUserFactory.admin(full_name="Zoe Admin"),
            TestUserFactory.user(
                id=TestUserFactory.SECONDARY_ID,
                email="alex@tillbook.io",
                full_name="Alex Ops",
            ),
            TestUserFactory.user(
                id=UUID("00000000-0000-0000-0000-000000000003"),
                email="staff@example.com",
                role=UserRole.TEAM_MEMBER,
            ),
        ]
        query = ListTeamMembersQuery(user_repo, TeamMembershipPolicy(domain="tillbook.io"))

        members = await query.execute()

        assert [m.email for m in members] == [
            "alex@tillbook.io",
            "staff@example.com",
            "admin@example.com",
        ]

    @pytest.mark.asyncio
    async def test_plain_users_only(self):
        user_repo = AsyncMock()
        user_repo.list_all.return_value = [TestUserFactory.user()]

        members = await ListTeamMembersQuery(user_repo, TeamMembershipPolicy()).execute()

        assert members == []


class TestListRecordsQueries:
    def setup_method(self):
        self.repo = AsyncMock()

    @pytest.mark.asyncio
    async def test_list_delegates_to_repository(self):
        invoice = Invoice(user_id=TestUserFactory.DEFAULT_ID, client_name="Acme Corp")
        self.repo.find_all.return_value = [invoice]

        assert await ListInvoicesQuery(self.repo).execute() == [invoice]

    @pytest.mark.asyncio
    async def test_get(self):
        invoice = Invoice(user_id=TestUserFactory.DEFAULT_ID, client_name="Acme Corp")
        self.repo.find_by_id.return_value = invoice

        assert await ListInvoicesQuery(self.repo).get(invoice.id) is invoice

    @pytest.mark.parametrize(
        ("query_cls", "error"),
        [
            (ListInvoicesQuery, InvoiceNotFoundError),
            (ListCompanyAssetsQuery, CompanyAssetNotFoundError),
            (ListAgreementsQuery, AgreementNotFoundError),
        ],
    )
    @pytest.mark.asyncio
    async def test_get_unknown(self, query_cls, error):
        self.repo.find_by_id.return_value = None

        with pytest.raises(error):
            await query_cls(self.repo).get("missing")
