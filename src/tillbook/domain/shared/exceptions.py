"""Domain exception hierarchy and error codes.

Every error raised by the domain and application layers derives from
``DomainException`` so the API can render them uniformly.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes returned to API clients. Treat as public contract."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_AMOUNT = "INVALID_AMOUNT"

    # 403
    ACCESS_DENIED = "ACCESS_DENIED"
    ONBOARDING_REQUIRED = "ONBOARDING_REQUIRED"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    LINKED_ITEM_NOT_FOUND = "LINKED_ITEM_NOT_FOUND"
    INSTITUTION_NOT_FOUND = "INSTITUTION_NOT_FOUND"
    NO_CONNECTED_ACCOUNTS = "NO_CONNECTED_ACCOUNTS"
    INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
    ASSET_NOT_FOUND = "ASSET_NOT_FOUND"
    AGREEMENT_NOT_FOUND = "AGREEMENT_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    DUPLICATE_BANK_TRANSACTION = "DUPLICATE_BANK_TRANSACTION"

    # 422
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CANNOT_MODIFY_SELF = "CANNOT_MODIFY_SELF"

    # Aggregator (502/503)
    AGGREGATOR_ERROR = "AGGREGATOR_ERROR"
    AGGREGATOR_NOT_CONFIGURED = "AGGREGATOR_NOT_CONFIGURED"
    AGGREGATOR_REQUEST_FAILED = "AGGREGATOR_REQUEST_FAILED"
    ITEM_LOGIN_REQUIRED = "ITEM_LOGIN_REQUIRED"

    # Security
    ENCRYPTION_FAILED = "ENCRYPTION_FAILED"
    DECRYPTION_FAILED = "DECRYPTION_FAILED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for domain errors.

    Attributes
    ----------
    message
        Human-readable message, safe to show to end users
    code
        Stable code for programmatic handling
    details
        Extra context for logs; never rendered to clients
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT


class AccessDeniedError(DomainException):
    """The caller is authenticated but not allowed to do this."""

    default_code = ErrorCode.ACCESS_DENIED


class OnboardingRequiredError(AccessDeniedError):
    default_code = ErrorCode.ONBOARDING_REQUIRED

    def __init__(self) -> None:
        super().__init__("Complete onboarding before using this feature")
