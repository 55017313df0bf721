"""User domain exceptions."""

from tillbook.domain.shared.exceptions import (
    AccessDeniedError,
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    pass


class InvalidBusinessProfileError(ValidationError):
    pass


class EmailAlreadyExistsError(ConflictError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}", code=ErrorCode.USER_NOT_FOUND)


class CannotDeleteSelfError(BusinessRuleViolation):
    def __init__(self) -> None:
        super().__init__(
            "Cannot delete your own account",
            code=ErrorCode.CANNOT_MODIFY_SELF,
        )


class CannotDemoteSelfError(BusinessRuleViolation):
    def __init__(self) -> None:
        super().__init__(
            "Cannot remove your own admin role",
            code=ErrorCode.CANNOT_MODIFY_SELF,
        )


class RegistrationClosedError(AccessDeniedError):
    def __init__(self) -> None:
        super().__init__(
            "Registration is restricted to administrators",
            code=ErrorCode.REGISTRATION_CLOSED,
        )
