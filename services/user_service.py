from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
import logging
import uuid

from domain.models import User
from repositories import UserRepository
from app.exceptions import UnauthorizedError

logger = logging.getLogger("dailydiet.users")


def new_session_token() -> str:
    """Generate an opaque session token"""
    return str(uuid.uuid4())


class UserService:
    """Business logic for user registration and session lookup"""

    @staticmethod
    def create_user(
        db: Session, name: str, email: str, session_token: Optional[str] = None
    ) -> Tuple[User, bool]:
        """
        Register a user under the caller's session token, issuing a new token
        when the caller has none.

        Returns a tuple of (User, issued_flag); issued_flag tells the caller
        that a cookie must be set on the response.
        """
        issued = not session_token
        token = new_session_token() if issued else session_token

        user = UserRepository(db).create_user(
            name=name, email=email, session_token=token
        )
        logger.info(f"user_created user_id={user.id} new_session={issued}")
        return user, issued

    @staticmethod
    def list_users(db: Session, session_token: str) -> List[User]:
        """Return the users registered under a session token"""
        return UserRepository(db).list_by_session_token(session_token)

    @staticmethod
    def resolve_user(db: Session, session_token: str) -> User:
        """Return the user owning a session token or raise UnauthorizedError"""
        user = UserRepository(db).get_by_session_token(session_token)
        if user is None:
            logger.warning("session_unknown")
            raise UnauthorizedError("Unknown session")
        return user
