"""Translation of domain and auth failures into JSON error responses.

Every handled failure answers with the same body, for example

    {"detail": "Transaction not found", "code": "TRANSACTION_NOT_FOUND"}

Request validation errors keep FastAPI's 422 format.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tillbook.domain.banking.exceptions import AggregatorError
from tillbook.domain.shared.exceptions import (
    AccessDeniedError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from tillbook_auth import (
    AccountLockedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ITEM_LOGIN_REQUIRED: status.HTTP_400_BAD_REQUEST,
    # 403 Forbidden
    ErrorCode.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.ONBOARDING_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TRANSACTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.LINKED_ITEM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INSTITUTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NO_CONNECTED_ACCOUNTS: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVOICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ASSET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.AGREEMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_BANK_TRANSACTION: status.HTTP_409_CONFLICT,
    # 422 Unprocessable Entity
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.CANNOT_MODIFY_SELF: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # Aggregator
    ErrorCode.AGGREGATOR_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.AGGREGATOR_REQUEST_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.AGGREGATOR_NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500
    ErrorCode.ENCRYPTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.DECRYPTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Auth failures carry no ErrorCode of their own
AUTH_ERROR_STATUS: dict[type[AuthError], tuple[int, str]] = {
    WeakPasswordError: (status.HTTP_400_BAD_REQUEST, "WEAK_PASSWORD"),
    InvalidCredentialsError: (status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS"),
    InvalidTokenError: (status.HTTP_401_UNAUTHORIZED, "INVALID_TOKEN"),
    AccountLockedError: (status.HTTP_423_LOCKED, "ACCOUNT_LOCKED"),
}


# Checked in order when a code has no entry above
FALLBACK_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (AggregatorError, status.HTTP_502_BAD_GATEWAY),
)


def _get_status_for_exception(exc: DomainException) -> int:
    status_code = ERROR_CODE_TO_STATUS.get(exc.code)
    if status_code is not None:
        return status_code
    for exc_type, fallback in FALLBACK_STATUS:
        if isinstance(exc, exc_type):
            return fallback
    return status.HTTP_400_BAD_REQUEST


def _error(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message, "code": code})


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain, auth and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)
        log = logger.error if status_code >= 500 else logger.warning  # NOQA: PLR2004
        log(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error(status_code, exc.message, exc.code.value)

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        status_code, code = status.HTTP_401_UNAUTHORIZED, "AUTHENTICATION_FAILED"
        for exc_type, mapping in AUTH_ERROR_STATUS.items():
            if isinstance(exc, exc_type):
                status_code, code = mapping
                break

        logger.info(
            "Auth failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _error(status_code, exc.message, code)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always get the same error shape."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR.value,
        )
