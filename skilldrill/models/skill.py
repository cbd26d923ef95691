from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String

from skilldrill.database import Base, utcnow


# skilldrill/models/skill.py
class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    # Ordered category labels; uniqueness is assumed, not enforced.
    categories = Column(JSON, default=list, nullable=False)
    created_by = Column(String(255), index=True)
    is_public = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
