"""
Authentication Routes

POST /auth/register - Register and start a session
POST /auth/login - Login and start a session
POST /auth/logout - End the current session
GET /auth/me - Get current user info
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response

from internhub.core.auth import (
    CredentialStrategy, close_session, get_credential_strategy, get_optional_user,
    get_repository, get_session_token, open_session, settings,
)
from internhub.core.errors import AuthenticationError
from internhub.models import User
from internhub.repositories import Repository
from internhub.schemas.schemas import LoginRequest, MessageResponse, RegisterRequest, UserResponse
from internhub.services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )


def to_user_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    request: RegisterRequest,
    response: Response,
    repo: Repository = Depends(get_repository),
):
    """
    Register a student or employer account.

    The matching profile is created along with the user and the caller is
    logged in straight away.
    """
    user = AccountService(repo).register(request)
    set_session_cookie(response, open_session(repo, user))
    return to_user_response(user)


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    repo: Repository = Depends(get_repository),
    strategy: CredentialStrategy = Depends(get_credential_strategy),
):
    """Check credentials and set the session cookie."""
    user = AccountService(repo).authenticate(strategy, request.email, request.password)
    set_session_cookie(response, open_session(repo, user))
    return to_user_response(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    repo: Repository = Depends(get_repository),
):
    close_session(repo, token)
    response.delete_cookie(settings.session_cookie_name, httponly=True, samesite="lax")
    logger.info("Session closed")
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_me(user: Optional[User] = Depends(get_optional_user)):
    if user is None:
        raise AuthenticationError("Not authenticated")
    return to_user_response(user)
