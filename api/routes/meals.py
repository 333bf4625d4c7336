"""Meal log routes; every route acts on the caller's own meals"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_current_user
from api.responses import BAD_REQUEST, NOT_FOUND, UNAUTHORIZED
from domain.models import User, get_db_session
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"], responses=UNAUTHORIZED)
logger = logging.getLogger("dailydiet.api.meals")


@router.get("", response_model=List[MealResponse])
def list_meals(
    user: User = Depends(get_current_user), db: Session = Depends(get_db_session)
):
    """List the caller's meals, most recent first"""
    meals = MealService.list_meals(db, user.id)
    return [MealResponse.model_validate(m) for m in meals]


@router.get("/{meal_id}", response_model=MealResponse, responses=NOT_FOUND)
def get_meal(
    meal_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    meal = MealService.get_meal(db, user.id, meal_id)
    return MealResponse.model_validate(meal)


@router.post("", status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_meal(
    payload: MealCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Log a meal dated now"""
    MealService.create_meal(db, user.id, payload)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
def update_meal(
    meal_id: str,
    payload: MealUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Replace name, description, diet flag and date of a meal"""
    MealService.update_meal(db, user.id, meal_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND
)
def delete_meal(
    meal_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    MealService.delete_meal(db, user.id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
