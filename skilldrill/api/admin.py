# skilldrill/api/admin.py
"""
Development maintenance endpoints: seed sample data, clear everything and
report row counts. Hidden (404) unless ENABLE_ADMIN_ROUTES is set.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.config import settings
from skilldrill.database import get_db
from skilldrill.services import progress_service, seed_service


def require_admin_routes_enabled():
    if not settings.ENABLE_ADMIN_ROUTES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin_routes_enabled)],
)


@router.get("/stats", response_model=schemas.DatabaseStats)
def get_database_stats(db: Session = Depends(get_db)):
    return progress_service.get_database_stats(db)


@router.post("/seed", response_model=schemas.SeedResult)
def seed_database(db: Session = Depends(get_db)):
    return seed_service.seed_database(db)


@router.post("/clear", response_model=schemas.ClearResult)
def clear_database(db: Session = Depends(get_db)):
    """Deletes every session, drill, skill and user."""
    return seed_service.clear_database(db)
