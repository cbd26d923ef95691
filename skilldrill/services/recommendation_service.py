# skilldrill/services/recommendation_service.py
"""
AI-backed drill actions.

These are the action-style entry points used by the clients: each returns a
tagged result (``success`` plus payload, or ``success=False`` plus
``error``) instead of raising. Nothing is retried.
"""

import logging
import random
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.crud import drill as drill_crud
from skilldrill.crud import skill as skill_crud
from skilldrill.crud.user import require_user
from skilldrill.database import utcnow
from skilldrill.exceptions import NotFoundError, SkillDrillError, UpstreamServiceError, ValidationError
from skilldrill.models.drill import Difficulty
from skilldrill.schemas.ai import (
    DailyDrillResult,
    DrillAnalysis,
    DrillVariationsResult,
    GenerateDrillResult,
    HistoryDrill,
    HistoryItem,
    ProgressAnalysis,
    ProgressAnalysisResult,
    ProgressStats,
)
from skilldrill.services import drafting_service, progress_service
from skilldrill.services.drafting_service import DraftingClient

logger = logging.getLogger(__name__)


# =====================================
# POLICY CONSTANTS
# =====================================

class RecommendationPolicy:
    """Tuning knobs for drill recommendation and progress analysis."""
    DAILY_DRILL_DIFFICULTY = Difficulty.INTERMEDIATE
    PROMPT_HISTORY_SIZE = 3
    ANALYSIS_HISTORY_SIZE = 100
    MAX_VARIATIONS = 10
    PROMOTION_THRESHOLD = 5  # sessions at current level before moving up
    FOCUS_AREA_COUNT = 2


# =====================================
# HELPERS
# =====================================

def recent_history(db: Session, user_id: str, limit: int = RecommendationPolicy.PROMPT_HISTORY_SIZE) -> List[HistoryItem]:
    return [
        HistoryItem(
            drill_id=item.drill.id,
            completed_at=item.session.completed_at,
            notes=item.session.notes,
            drill=HistoryDrill(
                category=item.drill.category,
                difficulty=item.drill.difficulty,
                description=item.drill.description,
            ),
        )
        for item in progress_service.get_drill_history(db, user_id, limit=limit)
    ]


def assess_level(difficulty_counts: Dict[str, int]) -> Tuple[Difficulty, Difficulty]:
    """
    Current level is the hardest difficulty practised at least once
    (Beginner when nothing was practised). The recommendation moves one level
    up once the current level has PROMOTION_THRESHOLD sessions.
    """
    levels = list(Difficulty)
    current = Difficulty.BEGINNER
    for level in levels:
        if difficulty_counts.get(level.value, 0) > 0:
            current = level

    recommended = current
    position = levels.index(current)
    if (
        difficulty_counts.get(current.value, 0) >= RecommendationPolicy.PROMOTION_THRESHOLD
        and position + 1 < len(levels)
    ):
        recommended = levels[position + 1]
    return current, recommended


def focus_areas(categories: Sequence[str], category_counts: Dict[str, int]) -> List[str]:
    """Least practised categories first; ties keep the skill's own order."""
    ranked = sorted(
        enumerate(categories),
        key=lambda pair: (category_counts.get(pair[1], 0), pair[0]),
    )
    return [category for _, category in ranked[: RecommendationPolicy.FOCUS_AREA_COUNT]]


def _skill_sessions(
    db: Session,
    user_id: str,
    skill_id: int,
) -> List[progress_service.ResolvedSession]:
    history = progress_service.get_drill_history(
        db, user_id, limit=RecommendationPolicy.ANALYSIS_HISTORY_SIZE
    )
    return [item for item in history if item.skill.id == skill_id]


def _count_by(items: Sequence[progress_service.ResolvedSession]) -> Tuple[Dict[str, int], Dict[str, int]]:
    by_difficulty = progress_service.empty_difficulty_counts()
    by_category: Dict[str, int] = {}
    for item in items:
        by_difficulty[Difficulty(item.drill.difficulty).value] += 1
        by_category[item.drill.category] = by_category.get(item.drill.category, 0) + 1
    return by_difficulty, by_category


def _failure(action: str, exc: Exception, db: Optional[Session] = None) -> str:
    if db is not None:
        db.rollback()
    if isinstance(exc, SQLAlchemyError):
        logger.exception("Database error while %s", action)
        return f"Database error while {action}"
    logger.warning("Error %s: %s", action, exc)
    return str(exc)


# =====================================
# GENERATE AND STORE
# =====================================

def generate_and_store_drill(
    db: Session,
    client: DraftingClient,
    skill_id: int,
    category: str,
    difficulty,
    user_id: str,
    user_history: Optional[Sequence[HistoryItem]] = None,
) -> GenerateDrillResult:
    """
    Draft a drill description with the AI provider and persist it.

    ``user_history`` defaults to the user's most recent completions.
    """
    try:
        skill = skill_crud.require_skill(db, skill_id)
        drill_crud.require_category(skill, category)
        level = drill_crud.coerce_difficulty(difficulty)
        require_user(db, user_id)

        if user_history is None:
            user_history = recent_history(db, user_id)

        prompt = drafting_service.build_drill_prompt(
            skill.name, category, level, skill.categories or [], user_history
        )
        description = client.complete(prompt)

        drill = drill_crud.create_drill(
            db,
            skill_id=skill.id,
            category=category,
            difficulty=level,
            description=description,
            created_by=user_id,
        )
        logger.info("Generated drill %s for skill %s (%s)", drill.id, skill.id, category)
        return GenerateDrillResult(success=True, drill=schemas.Drill.model_validate(drill))

    except (SkillDrillError, SQLAlchemyError) as e:
        return GenerateDrillResult(
            success=False, error=_failure("generating and storing drill", e, db)
        )


# =====================================
# DAILY DRILL
# =====================================

def get_daily_drill(
    db: Session,
    client: DraftingClient,
    user_id: str,
    skill_id: Optional[int] = None,
    category: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> DailyDrillResult:
    """
    Pick today's drill for a user.

    Without a skill, the newest skill visible to the user is used, and
    without a category, the skill's first category. An existing drill of the
    skill is chosen uniformly at random; when the skill has none, one is
    drafted through the AI provider and stored.
    """
    rng = rng or random.Random()
    try:
        require_user(db, user_id)

        target_skill_id = skill_id
        target_category = category

        if target_skill_id is None:
            skills = skill_crud.get_skills(db, user_id)
            if not skills:
                raise NotFoundError("No skills available", resource="skill")
            target_skill_id = skills[0].id

        skill = skill_crud.require_skill(db, target_skill_id)
        categories = list(skill.categories or [])

        if target_category:
            drill_crud.require_category(skill, target_category)
        elif categories:
            target_category = categories[0]
        else:
            raise ValidationError(f'Skill "{skill.name}" has no categories')

        existing = drill_crud.get_drills_by_skill(db, skill.id)
        if existing:
            drill = rng.choice(existing)
        else:
            level = RecommendationPolicy.DAILY_DRILL_DIFFICULTY
            prompt = drafting_service.build_drill_prompt(
                skill.name, target_category, level, categories, recent_history(db, user_id)
            )
            description = client.complete(prompt)
            drill = drill_crud.create_drill(
                db,
                skill_id=skill.id,
                category=target_category,
                difficulty=level,
                description=description,
                created_by=user_id,
            )
            logger.info("Drafted daily drill %s for user %s", drill.id, user_id)

        by_difficulty, by_category = _count_by(_skill_sessions(db, user_id, skill.id))
        current, recommended = assess_level(by_difficulty)

        return DailyDrillResult(
            success=True,
            drill=schemas.DrillWithSkill(
                **schemas.Drill.model_validate(drill).model_dump(),
                skill=schemas.Skill.model_validate(skill),
            ),
            analysis=DrillAnalysis(
                current_level=current.value,
                recommended_difficulty=recommended,
                focus_areas=focus_areas(categories, by_category),
            ),
        )

    except (SkillDrillError, SQLAlchemyError) as e:
        return DailyDrillResult(success=False, error=_failure("getting daily drill", e, db))


# =====================================
# VARIATIONS
# =====================================

def generate_drill_variations(
    db: Session,
    client: DraftingClient,
    skill_id: int,
    category: str,
    difficulty,
    user_id: str,
    count: int = 3,
) -> DrillVariationsResult:
    try:
        skill = skill_crud.require_skill(db, skill_id)
        drill_crud.require_category(skill, category)
        level = drill_crud.coerce_difficulty(difficulty)
        require_user(db, user_id)

        if not 1 <= count <= RecommendationPolicy.MAX_VARIATIONS:
            raise ValidationError(
                f"count must be between 1 and {RecommendationPolicy.MAX_VARIATIONS}"
            )

        prompt = drafting_service.build_variations_prompt(
            skill.name, category, level, skill.categories or [], count, recent_history(db, user_id)
        )
        variations = drafting_service.parse_variations(client.complete(prompt), count)
        if not variations:
            raise UpstreamServiceError("No drill variations could be parsed", resource="ai")

        # All variations land in one commit; any failure leaves none behind
        created = [
            drill_crud.stage_drill(
                db,
                skill_id=skill.id,
                category=category,
                difficulty=level,
                description=description,
                created_by=user_id,
            )
            for description in variations
        ]
        db.commit()
        for drill in created:
            db.refresh(drill)
        return DrillVariationsResult(
            success=True,
            drills=[schemas.Drill.model_validate(drill) for drill in created],
        )

    except (SkillDrillError, SQLAlchemyError) as e:
        return DrillVariationsResult(
            success=False, error=_failure("generating drill variations", e, db)
        )


# =====================================
# PROGRESS ANALYSIS
# =====================================

def analyze_user_progress(
    db: Session,
    client: DraftingClient,
    user_id: str,
    skill_id: int,
    category: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ProgressAnalysisResult:
    """Summarise the user's recent practice on a skill and ask for a suggestion."""
    now = now or utcnow()
    try:
        require_user(db, user_id)
        skill = skill_crud.require_skill(db, skill_id)
        if category:
            drill_crud.require_category(skill, category)

        sessions = _skill_sessions(db, user_id, skill.id)
        by_difficulty, by_category = _count_by(sessions)

        week_ago = now - timedelta(days=7)
        sessions_this_week = sum(1 for item in sessions if item.session.completed_at > week_ago)

        categories = list(skill.categories or [])
        most_practiced = "None"
        if by_category:
            # Highest count; ties go to the category listed first on the skill
            order = {name: index for index, name in enumerate(categories)}
            most_practiced = min(
                by_category,
                key=lambda name: (-by_category[name], order.get(name, len(order)), name),
            )

        current, recommended = assess_level(by_difficulty)

        suggestion = client.complete(
            drafting_service.build_analysis_prompt(
                user_id,
                skill.name,
                category,
                total_sessions=len(sessions),
                difficulty_progression=by_difficulty,
            )
        )

        return ProgressAnalysisResult(
            success=True,
            analysis=ProgressAnalysis(
                current_level=current.value,
                recommended_difficulty=recommended,
                focus_areas=focus_areas(categories, by_category),
                suggested_drill=suggestion,
                progress_stats=ProgressStats(
                    total_sessions=len(sessions),
                    average_sessions_per_week=sessions_this_week,
                    most_practiced_category=most_practiced,
                    difficulty_progression=by_difficulty,
                ),
            ),
        )

    except (SkillDrillError, SQLAlchemyError) as e:
        return ProgressAnalysisResult(
            success=False, error=_failure("analyzing user progress", e, db)
        )
