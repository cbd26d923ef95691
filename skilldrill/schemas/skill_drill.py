from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from skilldrill.models.drill import Difficulty


class SkillDrillCreate(BaseModel):
    skill_name: str = Field(..., min_length=1, max_length=100)
    level: Difficulty
    drill_description: str = Field(..., min_length=1, max_length=2000)
    assigned_date: datetime


class SkillDrillComplete(BaseModel):
    feedback: Optional[str] = None


class SkillDrill(BaseModel):
    id: int
    user_id: str
    skill_name: str
    level: Difficulty
    drill_description: str
    assigned_date: datetime
    completed: bool
    feedback: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
