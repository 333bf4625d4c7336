"""
User-related database models.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, Text, DateTime, Index, UUID
from sqlalchemy.orm import relationship

from domain.models.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """User registered through POST /users; identified by its session token"""

    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    session_token = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    # Relationships
    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (Index("ix_users_session_token", "session_token"),)
