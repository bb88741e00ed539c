"""
Authentication Utility - sessions, passwords and principals.

Provides:
- Password hashing with bcrypt
- Session cookie tokens (JWT pointing at a stored session row)
- A pluggable credential strategy for login
- FastAPI dependencies resolving the caller to a typed principal
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Protocol, Union

from fastapi import Depends, Request
from jose import JWTError, jwt
from passlib.context import CryptContext

from internhub.core.config import get_settings
from internhub.core.errors import AuthenticationError, AuthorizationError, NotFoundError
from internhub.models import User, UserRole
from internhub.repositories import Repository
from internhub.repositories.base import utcnow

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# CREDENTIAL STRATEGIES
# ============================================================

class CredentialStrategy(Protocol):
    def authenticate(self, repo: Repository, email: str, password: str) -> Optional[User]:
        ...


class PasswordCredentialStrategy:
    """Email + bcrypt password lookup against the users collection."""

    def authenticate(self, repo: Repository, email: str, password: str) -> Optional[User]:
        user = repo.users.first(email=email)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user


# ============================================================
# SESSIONS
# ============================================================

def create_session_token(session_id: int, user_id: int, expires_at) -> str:
    claims = {"sid": session_id, "sub": str(user_id), "exp": expires_at}
    return jwt.encode(claims, settings.session_secret_key, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> Optional[dict]:
    """Decode and verify a session token (signature and expiry)."""
    try:
        return jwt.decode(token, settings.session_secret_key, algorithms=[settings.session_algorithm])
    except JWTError:
        return None


def open_session(repo: Repository, user: User) -> str:
    """Persist a session for the user and return the cookie value.

    The user's expired sessions are purged first.
    """
    now = utcnow()
    for stale in repo.sessions.find(user_id=user.id):
        if stale.expires_at <= now:
            repo.sessions.delete(stale.id)
    expires_at = now + timedelta(days=settings.session_max_age_days)
    session = repo.sessions.create({"user_id": user.id, "expires_at": expires_at})
    return create_session_token(session.id, user.id, expires_at)


def resolve_session(repo: Repository, token: Optional[str]) -> Optional[User]:
    """Map a cookie value to its user, or None if absent, forged, expired or revoked."""
    if not token:
        return None
    claims = decode_session_token(token)
    if not claims or "sid" not in claims:
        return None

    session = repo.sessions.get(claims["sid"])
    if session is None or str(session.user_id) != claims.get("sub"):
        return None
    if session.expires_at <= utcnow():
        repo.sessions.delete(session.id)
        return None
    return repo.users.get(session.user_id)


def close_session(repo: Repository, token: Optional[str]) -> None:
    claims = decode_session_token(token) if token else None
    if claims and "sid" in claims:
        repo.sessions.delete(claims["sid"])


# ============================================================
# PRINCIPALS
# ============================================================

@dataclass(frozen=True)
class StudentPrincipal:
    user: User
    student_id: int


@dataclass(frozen=True)
class EmployerPrincipal:
    user: User
    employer_id: int


@dataclass(frozen=True)
class AdminPrincipal:
    user: User


Principal = Union[StudentPrincipal, EmployerPrincipal, AdminPrincipal]


def build_principal(repo: Repository, user: User) -> Principal:
    if user.user_type == UserRole.student:
        profile = repo.student_profiles.first(user_id=user.id)
        if profile is None:
            raise NotFoundError("Student profile not found")
        return StudentPrincipal(user=user, student_id=profile.id)
    if user.user_type == UserRole.employer:
        profile = repo.employer_profiles.first(user_id=user.id)
        if profile is None:
            raise NotFoundError("Employer profile not found")
        return EmployerPrincipal(user=user, employer_id=profile.id)
    if user.user_type == UserRole.admin:
        return AdminPrincipal(user=user)
    raise AuthorizationError("Unauthorized user type")


# ============================================================
# FASTAPI DEPENDENCIES
# ============================================================

def get_repository(request: Request) -> Repository:
    return request.app.state.repository


def get_credential_strategy(request: Request) -> CredentialStrategy:
    return request.app.state.credential_strategy


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)


async def get_optional_user(
    token: Optional[str] = Depends(get_session_token),
    repo: Repository = Depends(get_repository),
) -> Optional[User]:
    return resolve_session(repo, token)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        async def route(user: User = Depends(get_current_user)):
            return user
    """
    if user is None:
        raise AuthenticationError("Unauthorized")
    return user


async def get_current_principal(
    user: User = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> Principal:
    return build_principal(repo, user)


async def get_current_student(principal: Principal = Depends(get_current_principal)) -> StudentPrincipal:
    """Dependency - Require student role."""
    if not isinstance(principal, StudentPrincipal):
        raise AuthorizationError("Not a student profile")
    return principal


async def get_current_employer(principal: Principal = Depends(get_current_principal)) -> EmployerPrincipal:
    """Dependency - Require employer role."""
    if not isinstance(principal, EmployerPrincipal):
        raise AuthorizationError("Not an employer profile")
    return principal


async def get_current_admin(principal: Principal = Depends(get_current_principal)) -> AdminPrincipal:
    """Dependency - Require admin role."""
    if not isinstance(principal, AdminPrincipal):
        raise AuthorizationError("Admins only")
    return principal
