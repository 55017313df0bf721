from tillbook.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class LedgerTransactionNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.TRANSACTION_NOT_FOUND

    def __init__(self, transaction_id: str) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


class DuplicateBankTransactionError(ConflictError):
    """The tenant's ledger already holds a row for this bank transaction."""

    default_code = ErrorCode.DUPLICATE_BANK_TRANSACTION

    def __init__(self, bank_id: str) -> None:
        self.bank_id = bank_id
        super().__init__(f"Bank transaction already recorded: {bank_id}")
