from pydantic import BaseModel, EmailStr, Field, StrictStr
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    name: StrictStr = Field(..., min_length=1)
    email: EmailStr


class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    session_token: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
