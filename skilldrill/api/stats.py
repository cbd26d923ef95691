from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.database import get_db
from skilldrill.services import progress_service

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("/users/{user_id}", response_model=schemas.UserDrillStats)
def get_user_stats(user_id: str, limit: Optional[int] = None, db: Session = Depends(get_db)):
    """
    Totals plus per skill, difficulty and category counts for a user.

    ``limit`` restricts the aggregate to the N most recent completions.
    """
    return progress_service.compute_user_stats(db, user_id, limit=limit)
