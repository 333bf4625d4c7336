"""
Meal log models.
"""

import uuid

from sqlalchemy import Column, Text, Boolean, DateTime, ForeignKey, Index, UUID
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.user import utcnow


class Meal(Base):
    """A logged meal and whether it fits the owner's diet"""

    __tablename__ = "meals"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    is_on_diet = Column(Boolean, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    user = relationship("User", back_populates="meals")

    __table_args__ = (Index("ix_meals_user_id_date", "user_id", "date"),)
