from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================
# USER SCHEMAS
# ======================

class UserCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    name: Optional[str] = None


class UserUpdate(BaseModel):
    name: Optional[str] = None


class User(BaseModel):
    id: int
    user_id: str
    name: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
