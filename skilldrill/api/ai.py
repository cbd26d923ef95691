# skilldrill/api/ai.py
"""
AI drill actions.

Every endpoint answers 200 with a tagged result; failures are reported as
``{"success": false, "error": ...}`` rather than HTTP errors.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skilldrill.database import get_db
from skilldrill.schemas.ai import (
    AnalyzeProgressRequest,
    DailyDrillRequest,
    DailyDrillResult,
    DrillVariationsRequest,
    DrillVariationsResult,
    GenerateDrillRequest,
    GenerateDrillResult,
    ProgressAnalysisResult,
)
from skilldrill.services import recommendation_service
from skilldrill.services.drafting_service import DraftingClient, get_drafting_client

router = APIRouter(prefix="/ai", tags=["AI"])


@router.post("/generate-drill", response_model=GenerateDrillResult)
def generate_drill(
    payload: GenerateDrillRequest,
    client: DraftingClient = Depends(get_drafting_client),
    db: Session = Depends(get_db),
):
    return recommendation_service.generate_and_store_drill(
        db,
        client,
        skill_id=payload.skill_id,
        category=payload.category,
        difficulty=payload.difficulty,
        user_id=payload.user_id,
        user_history=payload.user_history,
    )


@router.post("/daily-drill", response_model=DailyDrillResult)
def daily_drill(
    payload: DailyDrillRequest,
    client: DraftingClient = Depends(get_drafting_client),
    db: Session = Depends(get_db),
):
    return recommendation_service.get_daily_drill(
        db,
        client,
        user_id=payload.user_id,
        skill_id=payload.skill_id,
        category=payload.category,
    )


@router.post("/drill-variations", response_model=DrillVariationsResult)
def drill_variations(
    payload: DrillVariationsRequest,
    client: DraftingClient = Depends(get_drafting_client),
    db: Session = Depends(get_db),
):
    return recommendation_service.generate_drill_variations(
        db,
        client,
        skill_id=payload.skill_id,
        category=payload.category,
        difficulty=payload.difficulty,
        user_id=payload.user_id,
        count=payload.count,
    )


@router.post("/analyze-progress", response_model=ProgressAnalysisResult)
def analyze_progress(
    payload: AnalyzeProgressRequest,
    client: DraftingClient = Depends(get_drafting_client),
    db: Session = Depends(get_db),
):
    return recommendation_service.analyze_user_progress(
        db,
        client,
        user_id=payload.user_id,
        skill_id=payload.skill_id,
        category=payload.category,
    )
