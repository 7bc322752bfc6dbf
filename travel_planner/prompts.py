"""Prompt templates for itinerary and recommendation generation."""
from __future__ import annotations

from typing import Iterable

from travel_planner.schemas import PlanRequest, RecommendationRequest

UNSPECIFIED = "未指定"
NO_EXTRA_REQUESTS = "特になし"
AI_CHOOSES_DESTINATION = "（未指定。出発地・到着地・テーマなどからAIが最適な目的地を提案してください）"

TRAVEL_CONDITIONS_TEMPLATE = """以下の条件に基づいて、詳細な旅行プランを生成してください。

【旅行基本情報】
- 出発地: {departure}
- 到着地: {arrival}
- 目的地: {destination}
- 旅行期間: {start} から {end} ({nights}泊{days}日)
- 参加人数: {members}名
- 予算: ¥{budget:,}
- 興味: {interests}
- 旅行スタイル: {style}
- 追加要望: {notes}
"""

PLAN_OUTPUT_SHAPE = """【出力形式】
以下のJSON形式で出力してください：
{
  "schedule": [
    {
      "date": "YYYY-MM-DD",
      "day": "Day 1",
      "items": [
        {
          "time": "HH:MM",
          "title": "アクティビティ名",
          "location": "場所名",
          "description": "詳細説明",
          "category": "transport|sightseeing|food|accommodation|activity"
        }
      ]
    }
  ],
  "places": [
    {
      "name": "スポット名",
      "category": "カテゴリ",
      "rating": 4.5,
      "description": "説明"
    }
  ],
  "budget": {
    "transportation": 0,
    "accommodation": 0,
    "food": 0,
    "activities": 0
  },
  "recommendations": {
    "mustVisit": ["必見スポット1", "必見スポット2"],
    "localFood": ["地元グルメ1", "地元グルメ2"],
    "tips": ["旅行のコツ1", "旅行のコツ2"]
  }
}
"""

PLAN_INSTRUCTIONS = (
    "予算内で現実的なプランを作成してください",
    "参加人数に応じた適切なアクティビティを提案してください",
    "興味に基づいたスポットを選定してください",
    "旅行スタイルに合わせたスケジュールにしてください",
    "交通手段や移動時間も考慮してください",
    "出発地から到着地までの移動も考慮してください",
    "日本語で出力してください",
)

RECOMMENDATION_FIELDS = (
    "「name」「category（mustVisit, localFood, tipsのいずれか）」「description（100文字程度）」"
    "「image（画像URL）」「tags（3つ程度）」「rating（1.0〜5.0）」「aiReason（AIによる推薦理由）」"
    "「matchScore（1〜100）」「estimatedTime（例: 1時間）」「priceRange（例: ¥1000〜¥3000）」"
    "「isBookmarked（false固定）」"
)

RECOMMENDATION_OUTPUT_SHAPE = """【出力形式】
[
  {
    "name": "金閣寺",
    "category": "mustVisit",
    "description": "金閣寺は京都を代表する観光名所で、黄金に輝く美しい建物が池に映える絶景スポットです。",
    "image": "https://images.pexels.com/photos/1583884/pexels-photo-1583884.jpeg",
    "tags": ["歴史", "絶景", "寺院"],
    "rating": 4.8,
    "aiReason": "京都観光で外せない定番スポットです。",
    "matchScore": 95,
    "estimatedTime": "1時間",
    "priceRange": "¥400",
    "isBookmarked": false
  }
]
※10件程度返してください。"""


def _bullets(lines: Iterable[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def trip_length(request: PlanRequest) -> tuple[int, int]:
    """Return ``(nights, days)`` counting both the start and end date as days."""
    days = (request.end_date - request.start_date).days + 1
    return days - 1, days


def build_travel_prompt(request: PlanRequest) -> str:
    """Compose the itinerary prompt: constraints, expected JSON shape, instructions."""
    destination = request.destination
    if not destination and request.ai_suggest_destination:
        destination = AI_CHOOSES_DESTINATION

    nights, days = trip_length(request)
    conditions = TRAVEL_CONDITIONS_TEMPLATE.format(
        departure=request.departure or UNSPECIFIED,
        arrival=request.arrival or UNSPECIFIED,
        destination=destination,
        start=request.start_date.isoformat(),
        end=request.end_date.isoformat(),
        nights=nights,
        days=days,
        members=request.member_count,
        budget=request.budget,
        interests=", ".join(request.interests),
        style=request.travel_style,
        notes=request.description or NO_EXTRA_REQUESTS,
    )
    return "\n".join([conditions, PLAN_OUTPUT_SHAPE, "【注意事項】", _bullets(PLAN_INSTRUCTIONS)]) + "\n"


def build_recommendation_prompt(request: RecommendationRequest) -> str:
    conditions = [
        f"目的地: {request.destination}",
        f"地域: {request.region}" if request.region else "",
        f"興味: {', '.join(request.interests)}",
        f"予算: {request.budget}",
        f"旅行スタイル: {request.travel_style}",
        f"人数: {request.group_size}",
        f"日数: {request.duration}",
        f"追加要望: {request.custom_note or NO_EXTRA_REQUESTS}",
    ]
    return (
        "あなたはプロの旅行プランナーです。以下の条件に合う観光地・体験・グルメを日本語で推薦してください。\n\n"
        f"各推薦には{RECOMMENDATION_FIELDS}を必ず含めてください。\n\n"
        "【条件】\n"
        + "\n".join(conditions)
        + "\n\n"
        + RECOMMENDATION_OUTPUT_SHAPE
    )
