"""Registration, login and token handling for tenants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal
from uuid import UUID

from tillbook.domain.user import (
    BusinessProfile,
    EmailAlreadyExistsError,
    RegistrationClosedError,
    TeamMembershipPolicy,
    User,
    UserRole,
)
from tillbook_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPair,
)

if TYPE_CHECKING:
    from tillbook.domain.user import UserRepository
    from tillbook_auth.repositories import UserCredentialRepository

logger = logging.getLogger(__name__)

DEV_USER_EMAIL = "dev@localhost.dev"

RegistrationMode = Literal["open", "admin_only"]


@dataclass(frozen=True)
class AuthResult:
    user: User
    tokens: TokenPair


class AuthenticationService:
    """
    Application service tying tillbook_auth (bcrypt, JWT, credential store)
    to the User aggregate.

    Besides plain password auth it applies two tenant rules:

    - the very first account becomes admin, and with ``admin_only``
      registration it is also the only self-registered one;
    - team e-mail addresses are upgraded to ``team_member`` with onboarding
      completed, at registration and again at every login.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        team_policy: TeamMembershipPolicy | None = None,
        registration_mode: RegistrationMode = "open",
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._team_policy = team_policy or TeamMembershipPolicy()
        self._registration_mode = registration_mode

    async def register(
        self,
        email: str,
        password: str,
        full_name: str | None = None,
    ) -> AuthResult:
        if await self._user_repo.find_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        is_first_user = await self._user_repo.count() == 0
        if not is_first_user and self._registration_mode == "admin_only":
            raise RegistrationClosedError

        password_hash = self._password_service.hash(password)
        user = User.create(
            email,
            role=UserRole.ADMIN if is_first_user else UserRole.USER,
            full_name=full_name,
        )
        self._team_policy.apply(user)

        await self._user_repo.save(user)
        await self._credential_repo.save(user.id, password_hash)

        logger.info("User registered: %s (role: %s)", user.id, user.role.value)
        return self._result(user)

    async def login(self, email: str, password: str) -> AuthResult:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError
        if credential.is_locked():
            raise AccountLockedError(locked_until=credential.locked_until)

        if not self._password_service.verify(password, credential.password_hash):
            updated = await self._credential_repo.record_failed_attempt(user.id)
            if updated is not None and updated.is_locked():
                raise AccountLockedError(locked_until=updated.locked_until)
            raise InvalidCredentialsError

        await self._credential_repo.record_successful_login(user.id)
        if self._team_policy.apply(user):
            await self._user_repo.save(user)
            logger.info("Upgraded %s to team member on login", user.id)

        logger.info("User logged in: %s", user.id)
        return self._result(user)

    async def dev_login(self) -> AuthResult:
        """Sign in as the local development admin, creating it if needed."""
        user = await self._user_repo.find_by_email(DEV_USER_EMAIL)
        if user is None:
            user = User.create(DEV_USER_EMAIL, role=UserRole.ADMIN, full_name="Dev User")
        if not user.is_admin:
            user.promote_to_admin()
        if not user.onboarding_completed:
            user.complete_onboarding(BusinessProfile(company_name="Dev Company"))
        await self._user_repo.save(user)

        logger.warning("Development login used")
        return self._result(user)

    async def refresh(self, refresh_token: str) -> AuthResult:
        payload = self._jwt_service.verify_refresh_token(refresh_token)
        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            raise InvalidTokenError("User no longer exists")
        return self._result(user)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        credential = await self._credential_repo.find_by_user_id(user_id)
        if credential is None or not self._password_service.verify(
            current_password,
            credential.password_hash,
        ):
            raise InvalidCredentialsError("Current password is incorrect")

        new_hash = self._password_service.hash(new_password)
        await self._credential_repo.save(user_id, new_hash)
        logger.info("Password changed for user %s", user_id)

    def _result(self, user: User) -> AuthResult:
        return AuthResult(
            user=user,
            tokens=self._jwt_service.issue_pair(user.id, user.email),
        )
