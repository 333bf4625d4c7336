"""
API dependencies for dependency injection.

The session cookie is the only credential: whoever presents a token is
treated as the user registered under it.
"""

from typing import Optional
from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import User, get_db_session
from services.user_service import UserService


def get_optional_session_token(
    session_token: Optional[str] = Cookie(None, alias=settings.session_cookie_name),
) -> Optional[str]:
    """Session token from the cookie, or None when the caller has none"""
    return session_token or None


def get_session_token(
    session_token: Optional[str] = Depends(get_optional_session_token),
) -> str:
    """
    Session guard for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(session_token: str = Depends(get_session_token)):
            ...
    """
    if not session_token:
        raise UnauthorizedError("Unauthorized")
    return session_token


def get_current_user(
    session_token: str = Depends(get_session_token),
    db: Session = Depends(get_db_session),
) -> User:
    """User registered under the caller's session token"""
    return UserService.resolve_user(db, session_token)
