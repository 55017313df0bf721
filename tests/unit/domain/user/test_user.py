"""Unit tests for the User aggregate and its value objects."""

import pytest

from tests.shared.fixtures.factories import TestUserFactory
from tillbook.domain.user import (
    BusinessCategory,
    BusinessProfile,
    Email,
    InvalidBusinessProfileError,
    InvalidEmailError,
    TaxFilingStatus,
    TeamMembershipPolicy,
    User,
    UserRole,
)


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Owner@Example.COM ").value == "owner@example.com"

    def test_exposes_domain(self):
        assert Email("owner@example.com").domain == "example.com"

    @pytest.mark.parametrize("value", ["", "   ", "no-at-sign", "a@b", "a@@b.com"])
    def test_rejects_invalid_addresses(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestBusinessProfile:
    def test_defaults(self):
        profile = BusinessProfile(company_name="Acme")

        assert profile.tax_filing_status is TaxFilingStatus.SOLE_PROP
        assert profile.business_category is BusinessCategory.TECHNOLOGY
        assert profile.state == "CA"

    def test_normalizes_values(self):
        profile = BusinessProfile(
            company_name="  Acme  ",
            tax_filing_status="llc",
            business_category="consulting",
            state="ny",
        )

        assert profile.company_name == "Acme"
        assert profile.tax_filing_status is TaxFilingStatus.LLC
        assert profile.business_category is BusinessCategory.CONSULTING
        assert profile.state == "NY"

    def test_company_name_is_required(self):
        with pytest.raises(InvalidBusinessProfileError, match="Company name"):
            BusinessProfile(company_name="  ")

    @pytest.mark.parametrize("state", ["C", "CAL", "1A", ""])
    def test_state_must_be_two_letters(self, state):
        with pytest.raises(InvalidBusinessProfileError):
            BusinessProfile(company_name="Acme", state=state)

    def test_unknown_tax_status_is_rejected(self):
        with pytest.raises(InvalidBusinessProfileError):
            BusinessProfile(company_name="Acme", tax_filing_status="trust")


class TestUser:
    def test_create_defaults(self):
        user = User.create("Owner@Example.com")

        assert user.email == "owner@example.com"
        assert user.role is UserRole.USER
        assert not user.onboarding_completed
        assert not user.is_admin
        assert not user.has_team_role

    def test_admin_has_team_role(self):
        admin = TestUserFactory.admin()

        assert admin.is_admin
        assert admin.has_team_role

    def test_complete_onboarding_stores_profile(self):
        user = TestUserFactory.user()

        user.complete_onboarding(
            BusinessProfile(company_name="Acme", tax_filing_status="s_corp", state="tx"),
        )

        assert user.onboarding_completed
        assert user.company_name == "Acme"
        assert user.tax_filing_status is TaxFilingStatus.S_CORP
        assert user.state == "TX"
        assert user.updated_at > user.created_at

    def test_complete_onboarding_twice_overwrites_answers(self):
        user = TestUserFactory.onboarded_user()

        user.complete_onboarding(BusinessProfile(company_name="Renamed Inc"))

        assert user.onboarding_completed
        assert user.company_name == "Renamed Inc"

    def test_update_profile_ignores_none(self):
        user = TestUserFactory.onboarded_user(full_name="Sam")

        user.update_profile(company_name="New Co")

        assert user.full_name == "Sam"
        assert user.company_name == "New Co"
        assert user.onboarding_completed

    def test_join_team_upgrades_plain_user(self):
        user = TestUserFactory.user()

        user.join_team()

        assert user.role is UserRole.TEAM_MEMBER
        assert user.onboarding_completed

    def test_join_team_keeps_admin_role(self):
        admin = TestUserFactory.admin()

        admin.join_team()

        assert admin.role is UserRole.ADMIN
        assert admin.onboarding_completed

    def test_equality_is_by_id(self):
        assert TestUserFactory.user() == TestUserFactory.user(full_name="Other")
        assert TestUserFactory.user() != TestUserFactory.admin()


class TestTeamMembershipPolicy:
    def test_disabled_without_rules(self):
        policy = TeamMembershipPolicy()

        assert not policy.enabled
        assert not policy.is_team_email("staff@tillbook.io")

    def test_domain_match_is_case_insensitive(self):
        policy = TeamMembershipPolicy(domain="@Tillbook.io")

        assert policy.is_team_email("Jane@TILLBOOK.io")
        assert not policy.is_team_email("jane@tillbook.io.evil.com")
        assert not policy.is_team_email("jane@nottillbook.io")

    def test_explicit_email_list(self):
        policy = TeamMembershipPolicy(emails=[" Ops@Gmail.com ", ""])

        assert policy.is_team_email("ops@gmail.com")
        assert not policy.is_team_email("other@gmail.com")

    def test_role_counts_as_team_member(self):
        policy = TeamMembershipPolicy()
        user = TestUserFactory.user(role=UserRole.TEAM_MEMBER)

        assert policy.is_team_member(user)

    def test_apply_upgrades_matching_user(self):
        policy = TeamMembershipPolicy(domain="tillbook.io")
        user = TestUserFactory.user(email="staff@tillbook.io")

        changed = policy.apply(user)

        assert changed
        assert user.role is UserRole.TEAM_MEMBER
        assert user.onboarding_completed

    def test_apply_skips_completed_onboarding(self):
        policy = TeamMembershipPolicy(domain="tillbook.io")
        user = TestUserFactory.onboarded_user(email="staff@tillbook.io")

        assert not policy.apply(user)
        assert user.role is UserRole.USER

    def test_apply_skips_other_emails(self):
        policy = TeamMembershipPolicy(domain="tillbook.io")
        user = TestUserFactory.user()

        assert not policy.apply(user)
        assert not user.onboarding_completed
