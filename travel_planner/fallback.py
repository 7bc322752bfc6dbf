"""Deterministic itinerary used whenever the model cannot produce one."""
from __future__ import annotations

import math

from travel_planner.schemas import (
    BudgetBreakdown,
    GeneratedPlan,
    PlaceSuggestion,
    PlanRequest,
    ScheduleDay,
    ScheduleItem,
    TravelRecommendations,
)

BUDGET_SPLIT = {
    "transportation": 0.3,
    "accommodation": 0.4,
    "food": 0.2,
    "activities": 0.1,
}

DEFAULT_TIPS = ["現地の天気をチェックしましょう", "公共交通機関の時刻表を確認しましょう"]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def split_budget(total: int) -> BudgetBreakdown:
    """Fixed percentage split; buckets may drift from ``total`` by rounding."""
    return BudgetBreakdown(**{bucket: _round_half_up(total * share) for bucket, share in BUDGET_SPLIT.items()})


def build_fallback_plan(request: PlanRequest) -> GeneratedPlan:
    destination = request.destination
    day = ScheduleDay(
        date=request.start_date.isoformat(),
        day="Day 1",
        items=[
            ScheduleItem(
                time="09:00",
                title=f"{destination}到着",
                location=destination,
                description="空港・駅から目的地への移動",
                category="transport",
            ),
            ScheduleItem(
                time="14:00",
                title="おすすめ観光スポット",
                location=f"{destination}の名所",
                description=f"{'、'.join(request.interests)}に基づいたおすすめスポット",
                category="sightseeing",
            ),
        ],
    )
    return GeneratedPlan(
        schedule=[day],
        places=[
            PlaceSuggestion(
                name=f"{destination}の人気スポット",
                category="観光地",
                rating=4.5,
                description="AIが選んだおすすめの場所",
            )
        ],
        budget=split_budget(request.budget),
        recommendations=TravelRecommendations(
            must_visit=[f"{destination}の必見スポット"],
            local_food=[f"{destination}の名物グルメ"],
            tips=list(DEFAULT_TIPS),
        ),
    )
