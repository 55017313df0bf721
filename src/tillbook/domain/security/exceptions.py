from tillbook.domain.shared.exceptions import DomainException, ErrorCode


class EncryptionError(DomainException):
    default_code = ErrorCode.ENCRYPTION_FAILED


class DecryptionError(DomainException):
    """Wrong key or tampered ciphertext."""

    default_code = ErrorCode.DECRYPTION_FAILED
