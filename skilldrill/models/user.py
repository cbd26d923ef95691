from sqlalchemy import Column, DateTime, Integer, String

from skilldrill.database import Base, utcnow


# ---------------- USER (IDENTITY MIRROR) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Subject claim issued by the identity provider
    user_id = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(100))
    created_at = Column(DateTime, default=utcnow, nullable=False)
