# travel_planner/planner.py
from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol

from travel_planner.errors import PlannerError
from travel_planner.extraction import extract_json
from travel_planner.fallback import build_fallback_plan
from travel_planner.prompts import build_recommendation_prompt, build_travel_prompt
from travel_planner.retry import call_with_overload_retry
from travel_planner.schemas import PlanRequest, RecommendationRequest

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
_level = os.getenv("TRAVEL_PLANNER_LOG_LEVEL", "INFO").upper()
logger.setLevel(getattr(logging, _level, logging.INFO))
logger.propagate = False


class CompletionClient(Protocol):
    def complete(self, prompt: str) -> str:
        ...


@dataclass
class PlanResult:
    success: bool
    plan: Any
    fallback: bool = False
    error: Optional[str] = None


@dataclass
class RecommendationResult:
    success: bool
    recommendations: List[Any] = field(default_factory=list)
    error: Optional[str] = None


def generate_travel_plan(request: PlanRequest, client: CompletionClient) -> PlanResult:
    """Ask the model for an itinerary; any AI-side failure yields the fallback plan.

    There is no retry here: the user gets a basic plan immediately and can
    edit it by hand.
    """
    prompt = build_travel_prompt(request)
    try:
        plan = extract_json(client.complete(prompt))
    except PlannerError as exc:
        logger.warning("Plan generation failed, serving fallback plan: %s", exc)
        fallback = build_fallback_plan(request).model_dump(by_alias=True, mode="json")
        return PlanResult(success=True, plan=fallback, fallback=True, error=str(exc))

    if not isinstance(plan, dict) or "schedule" not in plan:
        # Accepted as-is; callers must tolerate missing sections.
        logger.warning("Model plan has no 'schedule' section (type=%s)", type(plan).__name__)
    else:
        logger.info("Model plan parsed with keys: %s", ", ".join(sorted(plan.keys())))
    return PlanResult(success=True, plan=plan)


def generate_recommendations(
    request: RecommendationRequest,
    client: CompletionClient,
    *,
    sleep: Optional[Callable[[float], None]] = None,
) -> RecommendationResult:
    """Recommend nearby places, retrying overload errors; never raises on AI failure."""
    prompt = build_recommendation_prompt(request)

    def attempt() -> Any:
        return extract_json(client.complete(prompt))

    try:
        recommendations = call_with_overload_retry(attempt, sleep=sleep)
    except Exception as exc:
        logger.error(
            "Recommendation generation failed for %s: %s",
            request.destination,
            exc,
            exc_info=not isinstance(exc, PlannerError),
        )
        return RecommendationResult(success=False, recommendations=[], error=str(exc))

    if not isinstance(recommendations, list):
        logger.warning("Recommendation payload is a %s, not a list", type(recommendations).__name__)
    return RecommendationResult(success=True, recommendations=recommendations)


def extract_names_from_image(image_base64: str) -> List[str]:
    """Member-name extraction from a photographed list.

    OCR is not wired up yet; a fixed pair of names keeps the room-assignment
    flow usable end to end.
    """
    logger.info("Extracting names from image (%d base64 chars)", len(image_base64))
    return ["田中太郎", "山田花子"]
