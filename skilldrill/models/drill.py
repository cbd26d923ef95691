import enum

from sqlalchemy import Column, DateTime, Enum, Index, Integer, String, Text

from skilldrill.database import Base, utcnow


class Difficulty(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


DIFFICULTY_LEVELS = tuple(level.value for level in Difficulty)


class Drill(Base):
    __tablename__ = "drills"
    __table_args__ = (
        Index("ix_drills_skill_id_category", "skill_id", "category"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Loose reference: the store does not enforce it, readers tolerate misses.
    skill_id = Column(Integer, nullable=False, index=True)
    category = Column(String(100), nullable=False)
    difficulty = Column(Enum(Difficulty, name="difficulty"), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    created_by = Column(String(255), nullable=False, index=True)
