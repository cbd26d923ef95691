from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from skilldrill.models.drill import Difficulty
from skilldrill.schemas.drill import Drill, DrillWithSkill

# ======================
# ACTION REQUEST MODELS
# ======================

class HistoryDrill(BaseModel):
    category: str
    difficulty: Difficulty
    description: str


class HistoryItem(BaseModel):
    """Condensed history entry handed to the drafting prompt."""
    drill_id: int
    completed_at: datetime
    notes: Optional[str] = None
    drill: HistoryDrill


class GenerateDrillRequest(BaseModel):
    skill_id: int
    category: str
    difficulty: Difficulty
    user_id: str
    user_history: Optional[List[HistoryItem]] = None


class DailyDrillRequest(BaseModel):
    user_id: str
    skill_id: Optional[int] = None
    category: Optional[str] = None


class DrillVariationsRequest(BaseModel):
    skill_id: int
    category: str
    difficulty: Difficulty
    user_id: str
    count: int = 3


class AnalyzeProgressRequest(BaseModel):
    user_id: str
    skill_id: int
    category: Optional[str] = None

# ======================
# TAGGED RESULTS
# ======================

class DrillAnalysis(BaseModel):
    current_level: str
    recommended_difficulty: Difficulty
    focus_areas: List[str]


class ProgressStats(BaseModel):
    total_sessions: int
    average_sessions_per_week: int
    most_practiced_category: str
    difficulty_progression: Dict[str, int]


class ProgressAnalysis(DrillAnalysis):
    suggested_drill: Optional[str] = None
    progress_stats: ProgressStats


class GenerateDrillResult(BaseModel):
    success: bool
    drill: Optional[Drill] = None
    error: Optional[str] = None


class DailyDrillResult(BaseModel):
    success: bool
    drill: Optional[DrillWithSkill] = None
    analysis: Optional[DrillAnalysis] = None
    error: Optional[str] = None


class DrillVariationsResult(BaseModel):
    success: bool
    drills: Optional[List[Drill]] = None
    error: Optional[str] = None


class ProgressAnalysisResult(BaseModel):
    success: bool
    analysis: Optional[ProgressAnalysis] = None
    error: Optional[str] = None
