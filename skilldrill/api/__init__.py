# skilldrill/api/__init__.py
# Import all routers for easy access

from . import admin
from . import ai
from . import drills
from . import sessions
from . import skill_drills
from . import skills
from . import stats
from . import users

__all__ = [
    "admin",
    "ai",
    "drills",
    "sessions",
    "skill_drills",
    "skills",
    "stats",
    "users",
]
