"""API tests for client route guard decisions."""

import pytest

pytestmark = pytest.mark.integration


def _check(client, prefix, path, headers=None):
    response = client.get(f"{prefix}/access/route", params={"path": path}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestRouteAccess:
    def test_anonymous_is_sent_to_login(self, test_client, api_v1_prefix):
        decision = _check(test_client, api_v1_prefix, "/dashboard")

        assert not decision["allowed"]
        assert decision["redirect_to"] == "/login"
        assert decision["from_path"] == "/dashboard"

    def test_login_page_is_public(self, test_client, api_v1_prefix):
        decision = _check(test_client, api_v1_prefix, "/login")

        assert decision["allowed"]
        assert not decision["require_auth"]

    def test_invalid_token_counts_as_anonymous(self, test_client, api_v1_prefix):
        decision = _check(
            test_client,
            api_v1_prefix,
            "/dashboard",
            headers={"Authorization": "Bearer expired"},
        )

        assert decision["redirect_to"] == "/login"

    def test_new_user_is_sent_to_onboarding(self, test_client, api_v1_prefix, user_headers):
        decision = _check(test_client, api_v1_prefix, "/transactions", user_headers)

        assert not decision["allowed"]
        assert decision["redirect_to"] == "/onboarding"

    def test_onboarding_page_is_open_to_new_users(
        self,
        test_client,
        api_v1_prefix,
        user_headers,
    ):
        decision = _check(test_client, api_v1_prefix, "/onboarding", user_headers)

        assert decision["allowed"]
        assert not decision["require_onboarding"]

    def test_onboarded_user_is_allowed(self, test_client, api_v1_prefix, onboarded_headers):
        decision = _check(test_client, api_v1_prefix, "/transactions", onboarded_headers)

        assert decision["allowed"]
        assert decision["redirect_to"] is None

    def test_admin_pages_need_the_admin_role(
        self,
        test_client,
        api_v1_prefix,
        admin_headers,
        onboarded_headers,
    ):
        denied = _check(test_client, api_v1_prefix, "/admin/users", onboarded_headers)
        allowed = _check(test_client, api_v1_prefix, "/admin/users", admin_headers)

        assert denied["redirect_to"] == "/"
        assert denied["require_admin"]
        assert allowed["allowed"]
