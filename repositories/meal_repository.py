"""
Meal Repository - Data access layer for meal operations
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal
from domain.models.user import utcnow


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_user_id(self, user_id: UUID) -> List[Meal]:
        """Get all meals for a user, most recent first"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.date.desc())
            .all()
        )

    def get_for_user(self, user_id: UUID, meal_id: UUID) -> Optional[Meal]:
        """Get a meal by ID only if it belongs to the user"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        description: str,
        is_on_diet: bool,
        date: Optional[datetime] = None,
    ) -> Meal:
        """Create a new meal; date defaults to now"""
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            is_on_diet=is_on_diet,
            date=date or utcnow(),
        )
        return self.create(meal)

    def replace(
        self,
        meal: Meal,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> Meal:
        """Overwrite every mutable field of a meal"""
        meal.name = name
        meal.description = description
        meal.is_on_diet = is_on_diet
        meal.date = date
        meal.updated_at = utcnow()
        return self.update(meal)
