"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate, UserResponse
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from domain.schemas.validation import first_error_message

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    # Validation helpers
    "first_error_message",
]
