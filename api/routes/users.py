"""User registration routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_optional_session_token, get_session_token
from api.responses import BAD_REQUEST, UNAUTHORIZED
from app.config import settings
from domain.models import get_db_session
from domain.schemas.user_schemas import UserCreate, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


@router.get("", response_model=List[UserResponse], responses=UNAUTHORIZED)
def list_users(
    session_token: str = Depends(get_session_token),
    db: Session = Depends(get_db_session),
):
    """Return the users registered under the caller's session."""
    users = UserService.list_users(db, session_token)
    return [UserResponse.model_validate(u) for u in users]


@router.post("", status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_user(
    user: UserCreate,
    session_token: Optional[str] = Depends(get_optional_session_token),
    db: Session = Depends(get_db_session),
):
    """
    Register a user.

    Callers without a session cookie get a fresh token set as the
    session cookie; an existing cookie is reused and left untouched.
    """
    created, issued = UserService.create_user(db, user.name, user.email, session_token)

    response = Response(status_code=status.HTTP_201_CREATED)
    if issued:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=created.session_token,
            max_age=settings.session_cookie_max_age,
            path="/",
        )
    return response
