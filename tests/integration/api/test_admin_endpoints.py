"""API tests for the admin dashboard endpoints."""

from decimal import Decimal

import pytest

pytestmark = pytest.mark.integration


def _user_id(client, prefix, headers) -> str:
    return client.get(f"{prefix}/auth/me", headers=headers).json()["id"]


class TestAdminGuard:
    def test_regular_user_is_forbidden(self, test_client, api_v1_prefix, onboarded_headers):
        response = test_client.get(f"{api_v1_prefix}/admin/stats", headers=onboarded_headers)

        assert response.status_code == 403

    def test_anonymous_is_unauthorized(self, test_client, api_v1_prefix):
        assert test_client.get(f"{api_v1_prefix}/admin/users").status_code == 401


class TestAdminStats:
    def test_stats(self, test_client, api_v1_prefix, admin_headers, onboarded_headers):
        for amount in ("100.25", "49.75"):
            test_client.post(
                f"{api_v1_prefix}/transactions",
                json={"date": "2024-03-01", "vendor": "Uber", "amount": amount},
                headers=onboarded_headers,
            )

        response = test_client.get(f"{api_v1_prefix}/admin/stats", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["users"] == {
            "total_users": 2,
            "onboarded_users": 1,
            "active_today": 2,
            "team_members": 1,
        }
        aggregate = data["aggregate"]
        assert aggregate["total_transactions"] == 2
        assert Decimal(str(aggregate["total_expenses"])) == Decimal("150.00")
        assert Decimal(str(aggregate["avg_expense_per_user"])) == Decimal("150.00")
        assert Decimal(str(aggregate["total_revenue"])) == Decimal("0")

    def test_users_newest_first_with_activity(
        self,
        test_client,
        api_v1_prefix,
        admin_headers,
        onboarded_headers,
    ):
        test_client.post(
            f"{api_v1_prefix}/transactions",
            json={"date": "2024-03-01", "vendor": "Uber", "amount": "12.50"},
            headers=onboarded_headers,
        )

        response = test_client.get(f"{api_v1_prefix}/admin/users", headers=admin_headers)

        users = response.json()
        assert [u["email"] for u in users] == ["owner@example.com", "admin@example.com"]
        assert users[0]["transaction_count"] == 1
        assert Decimal(str(users[0]["total_expenses"])) == Decimal("12.50")
        assert users[1]["transaction_count"] == 0


class TestUserManagement:
    def test_change_role(self, test_client, api_v1_prefix, admin_headers, user_headers):
        user_id = _user_id(test_client, api_v1_prefix, user_headers)

        response = test_client.patch(
            f"{api_v1_prefix}/admin/users/{user_id}/role",
            json={"role": "team_member"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["role"] == "team_member"
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=user_headers).json()
        assert me["is_team_member"]

    def test_cannot_demote_self(self, test_client, api_v1_prefix, admin_headers):
        admin_id = _user_id(test_client, api_v1_prefix, admin_headers)

        response = test_client.patch(
            f"{api_v1_prefix}/admin/users/{admin_id}/role",
            json={"role": "user"},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["code"] == "CANNOT_MODIFY_SELF"

    def test_unknown_role(self, test_client, api_v1_prefix, admin_headers, user_headers):
        user_id = _user_id(test_client, api_v1_prefix, user_headers)

        response = test_client.patch(
            f"{api_v1_prefix}/admin/users/{user_id}/role",
            json={"role": "owner"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_unknown_user(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.patch(
            f"{api_v1_prefix}/admin/users/00000000-0000-0000-0000-000000000099/role",
            json={"role": "admin"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_delete_user_removes_data(
        self,
        test_client,
        api_v1_prefix,
        admin_headers,
        onboarded_headers,
    ):
        user_id = _user_id(test_client, api_v1_prefix, onboarded_headers)
        test_client.post(
            f"{api_v1_prefix}/transactions",
            json={"date": "2024-03-01", "vendor": "Uber", "amount": "12.50"},
            headers=onboarded_headers,
        )

        response = test_client.delete(
            f"{api_v1_prefix}/admin/users/{user_id}",
            headers=admin_headers,
        )

        assert response.status_code == 204
        stats = test_client.get(f"{api_v1_prefix}/admin/stats", headers=admin_headers).json()
        assert stats["users"]["total_users"] == 1
        assert stats["aggregate"]["total_transactions"] == 0
        # The old token no longer resolves to a user
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=onboarded_headers)
        assert me.status_code == 401
        login = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "owner@example.com", "password": "SecurePassword123!"},
        )
        assert login.status_code == 401

    def test_cannot_delete_self(self, test_client, api_v1_prefix, admin_headers):
        admin_id = _user_id(test_client, api_v1_prefix, admin_headers)

        response = test_client.delete(
            f"{api_v1_prefix}/admin/users/{admin_id}",
            headers=admin_headers,
        )

        assert response.status_code == 422
