"""API tests for the ledger transaction endpoints."""

from decimal import Decimal

import pytest

pytestmark = pytest.mark.integration

EXPENSE = {
    "date": "2024-03-01",
    "vendor": "Office Depot",
    "amount": "42.50",
    "category": "Supplies & Materials",
}


@pytest.fixture
def ledger_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/transactions"


@pytest.fixture
def created(test_client, ledger_url, onboarded_headers) -> dict:
    response = test_client.post(ledger_url, json=EXPENSE, headers=onboarded_headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestGuards:
    def test_requires_authentication(self, test_client, ledger_url):
        assert test_client.get(ledger_url).status_code == 401

    def test_requires_onboarding(self, test_client, ledger_url, user_headers):
        response = test_client.post(ledger_url, json=EXPENSE, headers=user_headers)

        assert response.status_code == 403
        assert response.json()["code"] == "ONBOARDING_REQUIRED"


class TestLedgerCrud:
    def test_create(self, created):
        assert created["vendor"] == "Office Depot"
        assert Decimal(str(created["amount"])) == Decimal("42.50")
        assert created["source"] == "manual"
        assert not created["bank_verified"]
        assert created["bank_id"] is None

    def test_category_defaults(self, test_client, ledger_url, onboarded_headers):
        response = test_client.post(
            ledger_url,
            json={"date": "2024-03-02", "vendor": "Corner Cafe", "amount": "8.00"},
            headers=onboarded_headers,
        )

        assert response.json()["category"] == "Other Expenses"

    def test_list_newest_first(self, test_client, ledger_url, onboarded_headers, created):
        test_client.post(
            ledger_url,
            json={**EXPENSE, "date": "2024-03-20", "vendor": "Staples"},
            headers=onboarded_headers,
        )

        response = test_client.get(ledger_url, headers=onboarded_headers)

        assert response.status_code == 200
        assert [t["vendor"] for t in response.json()] == ["Staples", "Office Depot"]

    def test_get(self, test_client, ledger_url, onboarded_headers, created):
        response = test_client.get(f"{ledger_url}/{created['id']}", headers=onboarded_headers)

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_unknown(self, test_client, ledger_url, onboarded_headers):
        response = test_client.get(f"{ledger_url}/missing", headers=onboarded_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "TRANSACTION_NOT_FOUND"

    def test_partial_update(self, test_client, ledger_url, onboarded_headers, created):
        response = test_client.patch(
            f"{ledger_url}/{created['id']}",
            json={"amount": "45.00", "context": "printer paper"},
            headers=onboarded_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(str(data["amount"])) == Decimal("45.00")
        assert data["context"] == "printer paper"
        assert data["vendor"] == "Office Depot"

    def test_update_rejects_unknown_fields(
        self,
        test_client,
        ledger_url,
        onboarded_headers,
        created,
    ):
        response = test_client.patch(
            f"{ledger_url}/{created['id']}",
            json={"bank_id": "tx-forged"},
            headers=onboarded_headers,
        )

        assert response.status_code == 422

    def test_blank_vendor(self, test_client, ledger_url, onboarded_headers):
        response = test_client.post(
            ledger_url,
            json={**EXPENSE, "vendor": "   "},
            headers=onboarded_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_negative_amount(self, test_client, ledger_url, onboarded_headers):
        response = test_client.post(
            ledger_url,
            json={**EXPENSE, "amount": "-1.00"},
            headers=onboarded_headers,
        )

        assert response.status_code == 422

    def test_duplicate_bank_id_conflicts(self, test_client, ledger_url, onboarded_headers):
        payload = {**EXPENSE, "bank_id": "tx-1", "bank_verified": True}
        first = test_client.post(ledger_url, json=payload, headers=onboarded_headers)
        assert first.status_code == 201, first.text

        response = test_client.post(ledger_url, json=payload, headers=onboarded_headers)

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_BANK_TRANSACTION"
        listing = test_client.get(ledger_url, headers=onboarded_headers)
        assert len(listing.json()) == 1

    def test_delete(self, test_client, ledger_url, onboarded_headers, created):
        response = test_client.delete(f"{ledger_url}/{created['id']}", headers=onboarded_headers)
        assert response.status_code == 204

        again = test_client.delete(f"{ledger_url}/{created['id']}", headers=onboarded_headers)
        assert again.status_code == 404


class TestTenantIsolation:
    def test_other_tenant_sees_nothing(
        self,
        test_client,
        api_v1_prefix,
        ledger_url,
        admin_headers,
        created,
    ):
        test_client.post(
            f"{api_v1_prefix}/onboarding/complete",
            json={"company_name": "Admin Co"},
            headers=admin_headers,
        )

        listing = test_client.get(ledger_url, headers=admin_headers)
        single = test_client.get(f"{ledger_url}/{created['id']}", headers=admin_headers)
        delete = test_client.delete(f"{ledger_url}/{created['id']}", headers=admin_headers)

        assert listing.json() == []
        assert single.status_code == 404
        assert delete.status_code == 404

    def test_bank_id_is_unique_per_tenant_only(
        self,
        test_client,
        api_v1_prefix,
        ledger_url,
        onboarded_headers,
        admin_headers,
    ):
        test_client.post(
            f"{api_v1_prefix}/onboarding/complete",
            json={"company_name": "Admin Co"},
            headers=admin_headers,
        )
        payload = {**EXPENSE, "bank_id": "tx-1"}

        for headers in (onboarded_headers, admin_headers):
            response = test_client.post(ledger_url, json=payload, headers=headers)
            assert response.status_code == 201, response.text
