"""Request-scoped providers wired into the routers with ``Depends``.

The user guards (``CurrentUser``, ``OnboardedUser``, ``AdminUser`` and
``TeamMemberUser``) enforce the same rules as ``AccessPolicy`` on the server.
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tillbook.application.context import UserContext
from tillbook.application.services import AuthenticationService
from tillbook.domain.access import AccessPolicy
from tillbook.domain.banking.ports import BankDataAggregatorPort
from tillbook.domain.shared import OnboardingRequiredError
from tillbook.domain.user import TeamMembershipPolicy, User
from tillbook.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from tillbook.infrastructure.plaid import (
    PlaidAggregatorAdapter,
    PlaidLinkConfig,
    create_plaid_api,
)
from tillbook.presentation.api.config import get_api_settings
from tillbook_auth import InvalidTokenError, JWTService, PasswordHashingService
from tillbook_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from tillbook_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Shared async engine; the pool is reused across requests."""
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request. Uncommitted work is rolled back on close."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service() -> PasswordHashingService:
    return PasswordHashingService()


def get_team_policy(settings: SettingsDep) -> TeamMembershipPolicy:
    return TeamMembershipPolicy(
        domain=settings.team_email_domain,
        emails=settings.team_email_list,
    )


TeamPolicy = Annotated[TeamMembershipPolicy, Depends(get_team_policy)]


def get_access_policy(team_policy: TeamPolicy) -> AccessPolicy:
    return AccessPolicy(team_policy)


async def get_authentication_service(  # NOQA: PLR0913
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    team_policy: TeamMembershipPolicy = Depends(get_team_policy),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        team_policy=team_policy,
        registration_mode=settings.registration_mode,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
AccessPolicyDep = Annotated[AccessPolicy, Depends(get_access_policy)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication) and route guards
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    Load the user behind the Bearer access token.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, a refresh token, or its user
        no longer exists
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e.message)
        raise _unauthorized("Invalid or expired token") from e

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise _unauthorized("User not found")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User | None:
    """The current user, or None for anonymous or invalid credentials."""
    if credentials is None:
        return None

    try:
        return await get_current_user(credentials, session, jwt_service)
    except HTTPException:
        return None


OptionalCurrentUser = Annotated[User | None, Depends(get_current_user_optional)]


async def require_onboarded(user: User = Depends(get_current_user)) -> User:
    if not user.onboarding_completed:
        raise OnboardingRequiredError
    return user


OnboardedUser = Annotated[User, Depends(require_onboarded)]


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


AdminUser = Annotated[User, Depends(require_admin)]


async def require_team_member(
    access_policy: AccessPolicyDep,
    user: User = Depends(get_current_user),
) -> User:
    if not access_policy.is_team_member(user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Team member access required",
        )
    return user


TeamMemberUser = Annotated[User, Depends(require_team_member)]


# -----------------------------------------------------------------------------
# User Context & Repository Factory
# -----------------------------------------------------------------------------


async def get_user_context(user: User = Depends(get_current_user)) -> UserContext:
    return UserContext.create(user)


CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    settings: SettingsDep,
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
) -> SQLAlchemyRepositoryFactory:
    """Repository factory scoped to the current user."""
    return SQLAlchemyRepositoryFactory(
        session=session,
        user_context=user_context,
        encryption_key=settings.encryption_key.get_secret_value(),
    )


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Bank-data aggregator
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_bank_aggregator() -> BankDataAggregatorPort:
    """
    Shared aggregator adapter.

    Tests replace it through ``app.dependency_overrides``.
    """
    settings = get_settings()
    return PlaidAggregatorAdapter(
        api=create_plaid_api(settings),
        link_config=PlaidLinkConfig.from_settings(settings),
    )


BankAggregator = Annotated[BankDataAggregatorPort, Depends(get_bank_aggregator)]


# Application classes expose from_factory(); routers call them directly:
#
#   query = OnboardingStatusQuery.from_factory(factory)  # NOQA: ERA001
