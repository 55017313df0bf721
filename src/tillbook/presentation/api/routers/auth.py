"""Authentication router for registration, login, and token management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, HTTPException, Response, status

from tillbook.application.commands import UpdateProfileCommand
from tillbook.application.services import AuthResult
from tillbook.domain.access import AccessPolicy
from tillbook.presentation.api.dependencies import (
    AccessPolicyDep,
    AuthService,
    CurrentUser,
    DBSession,
    RepoFactory,
    SettingsDep,
)
from tillbook.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UpdateProfileRequest,
    UserResponse,
)
from tillbook_auth import AccountLockedError, InvalidCredentialsError
from tillbook_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

REFRESH_TOKEN_COOKIE = "tillbook_refresh_token"  # NOQA: S105
REFRESH_COOKIE_PATH = "/api/v1/auth"


def _set_refresh_token_cookie(
    response: Response,
    token: str,
    settings: Settings,
) -> None:
    """Set the refresh token as an HttpOnly cookie scoped to the auth endpoints."""
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=settings.jwt_refresh_token_expire_days * 24 * 60 * 60,
        path=REFRESH_COOKIE_PATH,
        domain=settings.api_cookie_domain,
    )


def _clear_refresh_token_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=REFRESH_TOKEN_COOKIE,
        path=REFRESH_COOKIE_PATH,
        domain=settings.api_cookie_domain,
    )


def _auth_response(
    result: AuthResult,
    response: Response,
    settings: Settings,
    access_policy: AccessPolicy,
) -> AuthResponse:
    _set_refresh_token_cookie(response, result.tokens.refresh_token, settings)
    return AuthResponse(
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
        expires_in=result.tokens.expires_in,
        user=UserResponse.from_user(
            result.user,
            is_team_member=access_policy.is_team_member(result.user),
        ),
        redirect_to=access_policy.post_login_redirect(result.user),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered"},
        400: {"description": "Weak password"},
        403: {"description": "Registration restricted to administrators"},
        409: {"description": "Email already registered"},
    },
)
async def register(  # NOQA: PLR0913
    request: RegisterRequest,
    response: Response,
    auth_service: AuthService,
    access_policy: AccessPolicyDep,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Create an account and its profile.

    The first account becomes admin. Team e-mail addresses skip onboarding.
    """
    result = await auth_service.register(
        email=request.email,
        password=request.password,
        full_name=request.full_name,
    )
    await session.commit()
    return _auth_response(result, response, settings, access_policy)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        423: {"description": "Account locked"},
    },
)
async def login(  # NOQA: PLR0913
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    access_policy: AccessPolicyDep,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    The account is locked for a while after repeated failures.
    """
    try:
        result = await auth_service.login(email=request.email, password=request.password)
    except (InvalidCredentialsError, AccountLockedError):
        await session.commit()  # keep the failed attempt count
        raise
    await session.commit()
    return _auth_response(result, response, settings, access_policy)


@router.post(
    "/dev-login",
    summary="Development login",
    responses={
        200: {"description": "Signed in as the development admin"},
        404: {"description": "Development login disabled"},
    },
)
async def dev_login(
    response: Response,
    auth_service: AuthService,
    access_policy: AccessPolicyDep,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """Sign in without a password. Only available on debug deployments."""
    if not settings.dev_login_available:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    result = await auth_service.dev_login()
    await session.commit()
    return _auth_response(result, response, settings, access_policy)


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "Tokens refreshed"},
        401: {"description": "Invalid or expired refresh token"},
    },
)
async def refresh_token(
    response: Response,
    auth_service: AuthService,
    settings: SettingsDep,
    request: RefreshRequest | None = None,
    refresh_token_cookie: Annotated[
        str | None,
        Cookie(alias=REFRESH_TOKEN_COOKIE),
    ] = None,
) -> TokenResponse:
    """
    Issue a new token pair from a refresh token.

    The refresh token is read from the body if given, else from the cookie.
    The new refresh token replaces the cookie.
    """
    token = (request.refresh_token if request else None) or refresh_token_cookie
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No refresh token provided",
        )

    result = await auth_service.refresh(token)
    _set_refresh_token_cookie(response, result.tokens.refresh_token, settings)
    return TokenResponse(
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
        expires_in=result.tokens.expires_in,
    )


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout user",
)
async def logout(response: Response, settings: SettingsDep) -> None:
    _clear_refresh_token_cookie(response, settings)


@router.get("/me", summary="Get current user")
async def get_me(user: CurrentUser, access_policy: AccessPolicyDep) -> UserResponse:
    return UserResponse.from_user(user, is_team_member=access_policy.is_team_member(user))


@router.patch(
    "/me",
    summary="Update profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid profile data"},
    },
)
async def update_me(
    request: UpdateProfileRequest,
    factory: RepoFactory,
    access_policy: AccessPolicyDep,
) -> UserResponse:
    """Edit profile fields. Role and onboarding status cannot be changed here."""
    command = UpdateProfileCommand.from_factory(factory)
    user = await command.execute(
        full_name=request.full_name,
        company_name=request.company_name,
        tax_filing_status=request.tax_filing_status,
        business_category=request.business_category,
        state=request.state,
    )
    await factory.session.commit()
    return UserResponse.from_user(user, is_team_member=access_policy.is_team_member(user))


@router.post(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
    responses={
        204: {"description": "Password changed"},
        400: {"description": "New password too weak"},
        401: {"description": "Current password incorrect"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    await auth_service.change_password(
        user_id=user.id,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    await session.commit()
