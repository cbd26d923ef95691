from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from skilldrill.models.drill import Difficulty
from skilldrill.schemas.skill import Skill


class DrillCreate(BaseModel):
    skill_id: int
    category: str = Field(..., min_length=1)
    difficulty: Difficulty
    description: str = Field(..., min_length=1)
    created_by: str = Field(..., min_length=1)


class Drill(BaseModel):
    id: int
    skill_id: int
    category: str
    difficulty: Difficulty
    description: str
    created_at: datetime
    created_by: str

    model_config = ConfigDict(from_attributes=True)


class DrillWithSkill(Drill):
    skill: Skill
