"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional, List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_session_token(self, session_token: str) -> Optional[User]:
        """Get the first user registered under a session token"""
        return (
            self.db.query(User)
            .filter(User.session_token == session_token)
            .order_by(User.created_at)
            .first()
        )

    def list_by_session_token(self, session_token: str) -> List[User]:
        """Get every user registered under a session token"""
        return (
            self.db.query(User)
            .filter(User.session_token == session_token)
            .order_by(User.created_at)
            .all()
        )

    def create_user(self, name: str, email: str, session_token: str) -> User:
        """Create a new user"""
        return self.create(User(name=name, email=email, session_token=session_token))
