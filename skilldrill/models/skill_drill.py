from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, Text

from skilldrill.database import Base, utcnow
from skilldrill.models.drill import Difficulty


# ---------------- SIMPLIFIED PER-USER DRILL ----------------
class SkillDrill(Base):
    __tablename__ = "skill_drills"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    skill_name = Column(String(100), nullable=False)
    level = Column(Enum(Difficulty, name="skill_drill_level"), nullable=False)
    drill_description = Column(Text, nullable=False)
    assigned_date = Column(DateTime, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    feedback = Column(Text)
    created_at = Column(DateTime, default=utcnow, nullable=False)
