"""Unit tests for route requirements and the access policy."""

import pytest

from tests.shared.fixtures.factories import TestUserFactory
from tillbook.domain.access import (
    AccessPolicy,
    AccessRequirement,
    resolve_route_requirement,
)
from tillbook.domain.user import TeamMembershipPolicy, UserRole


class TestResolveRouteRequirement:
    @pytest.mark.parametrize("path", ["/login", "/auth/callback", "/login?next=/x"])
    def test_public_routes(self, path):
        requirement = resolve_route_requirement(path)

        assert requirement == AccessRequirement.public()

    @pytest.mark.parametrize("path", ["/onboarding", "/onboarding/profile"])
    def test_onboarding_routes_only_need_auth(self, path):
        requirement = resolve_route_requirement(path)

        assert requirement.require_auth
        assert not requirement.require_onboarding
        assert not requirement.require_admin

    def test_admin_routes_need_admin_but_not_onboarding(self):
        requirement = resolve_route_requirement("/admin/users")

        assert requirement.require_admin
        assert not requirement.require_onboarding

    def test_team_routes_need_team_membership(self):
        requirement = resolve_route_requirement("/team/members")

        assert requirement.require_team_member
        assert not requirement.require_admin
        assert not requirement.require_onboarding

    @pytest.mark.parametrize("path", ["/", "/dashboard", "/transactions/", "/administrator"])
    def test_everything_else_needs_onboarding(self, path):
        requirement = resolve_route_requirement(path)

        assert requirement.require_auth
        assert requirement.require_onboarding
        assert not requirement.require_admin


class TestAccessPolicyEvaluate:
    def setup_method(self):
        self.policy = AccessPolicy()

    def test_anonymous_user_is_sent_to_login_with_origin(self):
        decision = self.policy.evaluate(None, "/dashboard")

        assert not decision.allowed
        assert decision.redirect_to == "/login"
        assert decision.from_path == "/dashboard"

    def test_anonymous_user_may_open_public_route(self):
        decision = self.policy.evaluate(None, "/login")

        assert decision.allowed

    def test_non_admin_is_sent_home_from_admin_route(self):
        user = TestUserFactory.onboarded_user()

        decision = self.policy.evaluate(user, "/admin")

        assert decision.redirect_to == "/"

    def test_admin_check_comes_before_onboarding_check(self):
        user = TestUserFactory.user()
        requirement = AccessRequirement(require_admin=True)

        decision = self.policy.evaluate(user, "/reports", requirement)

        assert decision.redirect_to == "/"

    def test_admin_without_onboarding_may_open_admin_route(self):
        admin = TestUserFactory.admin()

        decision = self.policy.evaluate(admin, "/admin/users")

        assert decision.allowed

    def test_user_without_onboarding_is_sent_to_onboarding(self):
        user = TestUserFactory.user()

        decision = self.policy.evaluate(user, "/dashboard")

        assert decision.redirect_to == "/onboarding"
        assert decision.from_path is None

    def test_onboarding_paths_do_not_loop(self):
        user = TestUserFactory.user()
        requirement = AccessRequirement()

        decision = self.policy.evaluate(user, "/onboarding/bank", requirement)

        assert decision.allowed

    def test_onboarded_user_is_allowed(self):
        user = TestUserFactory.onboarded_user()

        assert self.policy.evaluate(user, "/dashboard").allowed

    def test_team_requirement_rejects_regular_user(self):
        user = TestUserFactory.onboarded_user()
        requirement = AccessRequirement(require_team_member=True)

        decision = self.policy.evaluate(user, "/internal", requirement)

        assert decision.redirect_to == "/"

    def test_team_requirement_accepts_team_email(self):
        policy = AccessPolicy(TeamMembershipPolicy(domain="tillbook.io"))
        user = TestUserFactory.onboarded_user(email="staff@tillbook.io")
        requirement = AccessRequirement(require_team_member=True)

        assert policy.evaluate(user, "/internal", requirement).allowed


class TestPostLoginRedirect:
    def setup_method(self):
        self.policy = AccessPolicy()

    def test_new_user_goes_to_onboarding(self):
        assert self.policy.post_login_redirect(TestUserFactory.user()) == "/onboarding"

    def test_onboarded_user_goes_home(self):
        user = TestUserFactory.onboarded_user()

        assert self.policy.post_login_redirect(user) == "/"

    def test_team_member_goes_home_even_without_onboarding(self):
        user = TestUserFactory.user(role=UserRole.TEAM_MEMBER)

        assert self.policy.post_login_redirect(user) == "/"
