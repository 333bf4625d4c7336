"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MealRepository",
]
