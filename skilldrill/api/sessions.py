# skilldrill/api/sessions.py
"""
Completion log endpoints.

- POST /sessions/                     - record a completed drill
- GET  /sessions/history/{user_id}    - newest-first history with drill and skill
- GET  /sessions/by-drill/{drill_id}  - completions of one drill
- GET  /sessions/{session_id}         - single completion
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.crud import drill_session as session_crud
from skilldrill.database import get_db
from skilldrill.exceptions import NotFoundError
from skilldrill.services import progress_service

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post("/", response_model=schemas.DrillSession, status_code=status.HTTP_201_CREATED)
def log_completion(payload: schemas.DrillSessionCreate, db: Session = Depends(get_db)):
    return session_crud.log_completion(db, payload.user_id, payload.drill_id, payload.notes)


@router.get("/history/{user_id}", response_model=List[schemas.DrillHistoryEntry])
def get_history(user_id: str, limit: Optional[int] = None, db: Session = Depends(get_db)):
    history = progress_service.get_drill_history(db, user_id, limit=limit)
    return [progress_service.to_history_entry(item) for item in history]


@router.get("/by-drill/{drill_id}", response_model=List[schemas.DrillSession])
def list_sessions_by_drill(drill_id: int, limit: Optional[int] = None, db: Session = Depends(get_db)):
    return session_crud.get_sessions_by_drill(db, drill_id, limit=limit)


@router.get("/{session_id}", response_model=schemas.DrillSession)
def get_session(session_id: int, db: Session = Depends(get_db)):
    session = session_crud.get_session(db, session_id)
    if not session:
        raise NotFoundError("Session not found", resource="session")
    return session
