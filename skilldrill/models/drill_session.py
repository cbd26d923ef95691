from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from skilldrill.database import Base, utcnow


class DrillSession(Base):
    """Append-only fact: this user did this drill at this time."""

    __tablename__ = "drill_sessions"
    __table_args__ = (
        Index("ix_drill_sessions_user_id_completed_at", "user_id", "completed_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False)
    drill_id = Column(Integer, nullable=False, index=True)
    completed_at = Column(DateTime, default=utcnow, nullable=False)
    notes = Column(Text)
