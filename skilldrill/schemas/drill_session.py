from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from skilldrill.schemas.drill import Drill
from skilldrill.schemas.skill import Skill

# ======================
# SESSION REQUEST MODELS
# ======================

class DrillSessionCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    drill_id: int
    notes: Optional[str] = None

# ======================
# SESSION RESPONSE MODELS
# ======================

class DrillSession(BaseModel):
    id: int
    user_id: str
    drill_id: int
    completed_at: datetime
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DrillHistoryEntry(DrillSession):
    """Session joined with the drill performed and the drill's skill."""
    drill: Drill
    skill: Skill
