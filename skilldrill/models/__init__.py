# skilldrill/models/__init__.py
from .user import User
from .skill import Skill
from .drill import Difficulty, DIFFICULTY_LEVELS, Drill
from .drill_session import DrillSession
from .skill_drill import SkillDrill

__all__ = [
    "User",
    "Skill",
    "Difficulty",
    "DIFFICULTY_LEVELS",
    "Drill",
    "DrillSession",
    "SkillDrill",
]
