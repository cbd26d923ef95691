# skilldrill/services/drafting_service.py
"""
AI drafting client and prompt builders.

The client is built once at application startup (see ``skilldrill.main``)
and handed to request handlers through ``get_drafting_client``; nothing in
this module keeps a lazily-initialised global.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import google.generativeai as genai
from fastapi import Request

from skilldrill.config import Settings
from skilldrill.exceptions import UpstreamServiceError
from skilldrill.models.drill import Difficulty
from skilldrill.schemas.ai import HistoryItem

logger = logging.getLogger(__name__)

HISTORY_ENTRIES_IN_PROMPT = 3
VARIATION_MARKER_RE = re.compile(r"\n\s*(?:\d+\.|-|\*)\s*")


# =====================================
# CLIENTS
# =====================================

class DraftingClient(ABC):
    """Opaque text completion: prompt in, free text out."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Return the generated text or raise UpstreamServiceError."""


class UnconfiguredDraftingClient(DraftingClient):
    """Used when no provider key is configured; every call fails upstream."""

    def complete(self, prompt: str) -> str:
        raise UpstreamServiceError(
            "Google Gemini API key not found in environment variables",
            resource="ai",
        )


class GeminiDraftingClient(DraftingClient):
    def __init__(self, api_key: str, model_name: str = "gemini-1.5-flash"):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)
        logger.info("Gemini drafting client initialised with model '%s'", model_name)

    def complete(self, prompt: str) -> str:
        try:
            response = self.model.generate_content(prompt)
            # Blocked prompts carry no candidates; the accessors raise ValueError then
            parts = response.parts
            text = response.text if parts else ""
        except Exception as exc:
            logger.error("Google Gemini API error: %s", exc)
            raise UpstreamServiceError(f"Google Gemini API error: {exc}", resource="ai") from exc

        if not parts:
            logger.warning("Gemini returned no content (feedback=%s)", response.prompt_feedback)
            raise UpstreamServiceError("No content generated from Google Gemini", resource="ai")

        text = (text or "").strip()
        if not text:
            raise UpstreamServiceError("No content generated from Google Gemini", resource="ai")
        return text


def build_drafting_client(settings: Settings) -> DraftingClient:
    if settings.GEMINI_API_KEY:
        return GeminiDraftingClient(settings.GEMINI_API_KEY, settings.GEMINI_MODEL)
    logger.warning("GEMINI_API_KEY is not set; AI drafting calls will fail")
    return UnconfiguredDraftingClient()


def get_drafting_client(request: Request) -> DraftingClient:
    """FastAPI dependency returning the process-wide client built at startup."""
    return request.app.state.drafting_client


# =====================================
# PROMPTS
# =====================================

def _history_block(user_history: Optional[Sequence[HistoryItem]], closing: str) -> str:
    if not user_history:
        return ""
    lines = ["", "User's recent drill history:"]
    for index, item in enumerate(user_history[:HISTORY_ENTRIES_IN_PROMPT], start=1):
        lines.append(
            f"{index}. {item.drill.category} - {item.drill.difficulty.value}: {item.drill.description}"
        )
        if item.notes:
            lines.append(f"   Notes: {item.notes}")
    lines.append("")
    lines.append(closing)
    return "\n".join(lines) + "\n"


def build_drill_prompt(
    skill_name: str,
    category: str,
    difficulty: Difficulty,
    skill_categories: Sequence[str],
    user_history: Optional[Sequence[HistoryItem]] = None,
) -> str:
    """``user_history`` is newest first; only the first few entries are used."""
    prompt = (
        f"Create a {difficulty.value.lower()} level drill for {skill_name} - {category} category.\n"
        "\n"
        f"Skill: {skill_name}\n"
        f"Category: {category}\n"
        f"Difficulty: {difficulty.value}\n"
        f"Available Categories: {', '.join(skill_categories)}\n"
        "\n"
        "Requirements:\n"
        "- Make it specific and actionable\n"
        "- Include clear instructions\n"
        f"- Focus on {category} skills\n"
        f"- Appropriate for {difficulty.value} level\n"
        "- Engaging and progressive\n"
    )
    prompt += _history_block(
        user_history, "Consider the user's recent progress when creating this drill."
    )
    prompt += (
        "\nPlease provide a detailed, step-by-step drill description "
        "that the user can follow immediately."
    )
    return prompt


def build_variations_prompt(
    skill_name: str,
    category: str,
    difficulty: Difficulty,
    skill_categories: Sequence[str],
    count: int = 3,
    user_history: Optional[Sequence[HistoryItem]] = None,
) -> str:
    prompt = (
        f"Create {count} different {difficulty.value.lower()} level drill variations "
        f"for {skill_name} - {category} category.\n"
        "\n"
        f"Skill: {skill_name}\n"
        f"Category: {category}\n"
        f"Difficulty: {difficulty.value}\n"
        f"Available Categories: {', '.join(skill_categories)}\n"
        "\n"
        "Requirements for each variation:\n"
        "- Make it specific and actionable\n"
        "- Include clear instructions\n"
        f"- Focus on {category} skills\n"
        f"- Appropriate for {difficulty.value} level\n"
        "- Engaging and progressive\n"
        "- Each variation should be distinct and offer different approaches\n"
    )
    prompt += _history_block(
        user_history, "Consider the user's recent progress when creating these variations."
    )
    prompt += (
        f"\nPlease provide {count} detailed, step-by-step drill variations that the user "
        "can follow immediately. Number each variation clearly."
    )
    return prompt


def build_analysis_prompt(
    user_id: str,
    skill_name: str,
    category: Optional[str] = None,
    total_sessions: int = 0,
    difficulty_progression: Optional[dict] = None,
) -> str:
    prompt = f"Analyze the progress for user {user_id} in skill {skill_name}"
    if category:
        prompt += f", specifically in the {category} category"
    prompt += ".\n"

    prompt += f"\nCompleted sessions: {total_sessions}\n"
    if difficulty_progression:
        levels = ", ".join(f"{level}: {count}" for level, count in difficulty_progression.items())
        prompt += f"Sessions by difficulty: {levels}\n"

    prompt += (
        "\nPlease provide:\n"
        "1. Current skill level assessment\n"
        "2. Recommended difficulty for next drills\n"
        "3. Focus areas that need improvement\n"
        "4. Specific drill suggestions\n"
        "\n"
        "Make your analysis specific, actionable, and encouraging."
    )
    return prompt


# =====================================
# POST-PROCESSING
# =====================================

def parse_variations(content: str, count: int = 3) -> List[str]:
    """
    Split model output on numbered, dashed or starred list markers.
    A marker on the very first line counts too.
    """
    chunks = VARIATION_MARKER_RE.split("\n" + content.strip())
    variations = [chunk.strip() for chunk in chunks if chunk.strip()]
    return variations[:count]
