from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator
from datetime import datetime, timezone
from uuid import UUID


class MealCreate(BaseModel):
    """Schema for logging a new meal; its date is the time of the request"""

    name: StrictStr = Field(..., min_length=1, description="Meal name")
    description: StrictStr = Field(..., description="Free-text description")
    is_on_diet: StrictBool = Field(..., description="Whether the meal fits the diet")


class MealUpdate(MealCreate):
    """Schema for PUT /meals/{id}; every mutable field is replaced"""

    date: datetime = Field(..., description="When the meal was eaten")

    @field_validator("date")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        """Store dates in UTC; naive values are taken as UTC already"""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class MealResponse(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    description: str
    is_on_diet: bool
    date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
