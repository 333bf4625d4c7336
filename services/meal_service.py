from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for a user's meal log.

    Lookups by meal id are always scoped to the owning user, so a meal that
    belongs to another session is reported as not found.
    """

    @staticmethod
    def _parse_id(meal_id: str) -> UUID:
        try:
            return UUID(str(meal_id))
        except ValueError:
            logger.warning(f"meal_not_found meal_id={meal_id!r} reason=malformed")
            raise NotFoundError("Meal not found") from None

    @staticmethod
    def list_meals(db: Session, user_id: UUID) -> List[Meal]:
        """Return the user's meals, most recent first"""
        return MealRepository(db).get_by_user_id(user_id)

    @staticmethod
    def get_meal(db: Session, user_id: UUID, meal_id: str) -> Meal:
        meal = MealRepository(db).get_for_user(user_id, MealService._parse_id(meal_id))
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id} user_id={user_id}")
            raise NotFoundError("Meal not found")
        return meal

    @staticmethod
    def create_meal(db: Session, user_id: UUID, data: MealCreate) -> Meal:
        meal = MealRepository(db).create_meal(
            user_id=user_id,
            name=data.name,
            description=data.description,
            is_on_diet=data.is_on_diet,
        )
        logger.info(f"meal_created meal_id={meal.id} user_id={user_id}")
        return meal

    @staticmethod
    def update_meal(db: Session, user_id: UUID, meal_id: str, data: MealUpdate) -> Meal:
        """Replace name, description, diet flag and date of an existing meal"""
        repo = MealRepository(db)
        meal = MealService.get_meal(db, user_id, meal_id)
        meal = repo.replace(
            meal,
            name=data.name,
            description=data.description,
            is_on_diet=data.is_on_diet,
            date=data.date,
        )
        logger.info(f"meal_updated meal_id={meal.id} user_id={user_id}")
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: str) -> None:
        meal = MealService.get_meal(db, user_id, meal_id)
        MealRepository(db).delete(meal)
        logger.info(f"meal_deleted meal_id={meal_id} user_id={user_id}")
