from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ======================
# SKILL SCHEMAS
# ======================

class SkillBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    categories: List[str] = []
    created_by: Optional[str] = None
    is_public: bool = True


class SkillCreate(SkillBase):
    pass


class Skill(SkillBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

# ======================
# RESPONSE MODELS
# ======================

class SkillCategoryStat(BaseModel):
    category: str
    drill_count: int
    sessions_count: int


class SkillCategories(BaseModel):
    skill_name: str
    categories: List[str]
    category_stats: List[SkillCategoryStat]
