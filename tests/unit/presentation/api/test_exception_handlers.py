"""Tests for mapping domain and auth exceptions to HTTP responses."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tillbook.domain.banking import (
    AggregatorNotConfiguredError,
    AggregatorRequestError,
    ItemLoginRequiredError,
    NoConnectedAccountsError,
)
from tillbook.domain.ledger import DuplicateBankTransactionError
from tillbook.domain.records import AgreementNotFoundError, InvoiceNotFoundError
from tillbook.domain.shared import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
    OnboardingRequiredError,
)
from tillbook.domain.user import (
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    RegistrationClosedError,
)
from tillbook.presentation.api.exception_handlers import (
    _get_status_for_exception,
    setup_exception_handlers,
)
from tillbook_auth import AccountLockedError, InvalidCredentialsError, WeakPasswordError


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (ItemLoginRequiredError(), 400),
            (OnboardingRequiredError(), 403),
            (RegistrationClosedError(), 403),
            (NoConnectedAccountsError(), 404),
            (InvoiceNotFoundError("inv-1"), 404),
            (AgreementNotFoundError("agr-1"), 404),
            (EmailAlreadyExistsError("owner@example.com"), 409),
            (DuplicateBankTransactionError("tx-1"), 409),
            (CannotDemoteSelfError(), 422),
            (AggregatorRequestError("bad token", "INVALID_PUBLIC_TOKEN"), 502),
            (AggregatorNotConfiguredError(), 503),
        ],
    )
    def test_known_codes(self, exc, expected):
        assert _get_status_for_exception(exc) == expected

    def test_falls_back_on_exception_type(self):
        exc = EntityNotFoundError("Receipt not found", code=ErrorCode.INTERNAL_ERROR)
        # Codes in the table win over the type
        assert _get_status_for_exception(exc) == 500

        class ReceiptMissingError(EntityNotFoundError):
            pass

        assert _get_status_for_exception(ReceiptMissingError("gone")) == 404
        assert _get_status_for_exception(BusinessRuleViolation("no")) == 422


def _app_raising(exc: Exception) -> TestClient:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return TestClient(app)


class TestHandlers:
    def test_domain_error_body(self):
        response = _app_raising(OnboardingRequiredError()).get("/boom")

        assert response.status_code == 403
        body = response.json()
        assert body["code"] == "ONBOARDING_REQUIRED"
        assert body["detail"]

    def test_aggregator_details_are_not_rendered(self):
        exc = AggregatorRequestError("Plaid rejected the request", "INVALID_PUBLIC_TOKEN")

        response = _app_raising(exc).get("/boom")

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Plaid rejected the request",
            "code": "AGGREGATOR_REQUEST_FAILED",
        }

    @pytest.mark.parametrize(
        ("exc", "status_code", "code"),
        [
            (InvalidCredentialsError(), 401, "INVALID_CREDENTIALS"),
            (AccountLockedError(), 423, "ACCOUNT_LOCKED"),
            (WeakPasswordError("Password too short"), 400, "WEAK_PASSWORD"),
        ],
    )
    def test_auth_errors(self, exc, status_code, code):
        response = _app_raising(exc).get("/boom")

        assert response.status_code == status_code
        assert response.json()["code"] == code
