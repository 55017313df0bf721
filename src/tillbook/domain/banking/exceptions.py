"""Banking domain exceptions.

Errors coming from the bank-data aggregator are translated into these by
the infrastructure adapter; nothing above the adapter sees SDK exceptions.
"""

from tillbook.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)


class BankingDomainError(DomainException):
    """Base for banking errors."""


class AggregatorError(BankingDomainError):
    """The aggregator could not be reached or returned something unusable."""

    default_code = ErrorCode.AGGREGATOR_ERROR


class AggregatorNotConfiguredError(AggregatorError):
    default_code = ErrorCode.AGGREGATOR_NOT_CONFIGURED

    def __init__(self) -> None:
        super().__init__("Bank aggregator credentials are not configured")


class AggregatorRequestError(AggregatorError):
    """The aggregator rejected a request.

    ``error_code`` is the aggregator's own code (e.g. ``INVALID_PUBLIC_TOKEN``).
    """

    default_code = ErrorCode.AGGREGATOR_REQUEST_FAILED

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        error_type: str | None = None,
    ) -> None:
        self.error_code = error_code
        self.error_type = error_type
        super().__init__(
            message,
            details={"error_code": error_code, "error_type": error_type},
        )


class ItemLoginRequiredError(AggregatorRequestError):
    """The user has to re-authenticate the item with their bank."""

    default_code = ErrorCode.ITEM_LOGIN_REQUIRED

    def __init__(self, message: str = "Bank login expired, please reconnect") -> None:
        super().__init__(message, error_code="ITEM_LOGIN_REQUIRED")


class NoConnectedAccountsError(EntityNotFoundError):
    default_code = ErrorCode.NO_CONNECTED_ACCOUNTS

    def __init__(self) -> None:
        super().__init__("No connected bank accounts found")


class LinkedItemNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.LINKED_ITEM_NOT_FOUND

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Linked bank connection not found: {item_id}")


class InstitutionNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.INSTITUTION_NOT_FOUND

    def __init__(self, institution_id: str) -> None:
        self.institution_id = institution_id
        super().__init__(f"Institution not found: {institution_id}")
