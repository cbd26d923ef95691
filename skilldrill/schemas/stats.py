from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel


class SkillSessionCount(BaseModel):
    skill_id: int
    skill_name: str
    session_count: int
    last_completed: Optional[datetime] = None


class UserDrillStats(BaseModel):
    total_sessions: int
    total_drills: int
    total_skills: int
    sessions_by_skill: List[SkillSessionCount]
    sessions_by_difficulty: Dict[str, int]
    sessions_by_category: Dict[str, int]


class DatabaseStats(BaseModel):
    users_count: int
    skills_count: int
    drills_count: int
    sessions_count: int
    message: str
