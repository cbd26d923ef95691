# skilldrill/schemas/__init__.py

# User schemas
from .user import User, UserCreate, UserUpdate

# Skill schemas
from .skill import Skill, SkillCreate, SkillCategories, SkillCategoryStat

# Drill schemas
from .drill import Drill, DrillCreate, DrillWithSkill

# Completion session schemas
from .drill_session import DrillSession, DrillSessionCreate, DrillHistoryEntry

# Statistics
from .stats import DatabaseStats, SkillSessionCount, UserDrillStats

# Maintenance
from .admin import ClearResult, SeedResult

# Simplified per-user drills
from .skill_drill import SkillDrill, SkillDrillComplete, SkillDrillCreate

__all__ = [
    "User",
    "UserCreate",
    "UserUpdate",
    "Skill",
    "SkillCreate",
    "SkillCategories",
    "SkillCategoryStat",
    "Drill",
    "DrillCreate",
    "DrillWithSkill",
    "DrillSession",
    "DrillSessionCreate",
    "DrillHistoryEntry",
    "DatabaseStats",
    "SkillSessionCount",
    "UserDrillStats",
    "SkillDrill",
    "SkillDrillComplete",
    "SkillDrillCreate",
    "ClearResult",
    "SeedResult",
]
