"""Request checks that must pass before any model call is attempted."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from travel_planner.errors import InvalidRequestError

MAX_TRIP_SPAN_DAYS = 365

_PLAN_REQUIRED_FIELDS = ("startDate", "endDate", "memberCount", "budget")


def validate_travel_dates(start: date, end: date, *, today: date | None = None) -> None:
    """Reject reversed ranges and trips longer than a year.

    ``today`` enables the extra "no trips starting in the past" rule applied to
    stored travels; plan generation leaves it unset.
    """
    if today is not None and start < today:
        raise InvalidRequestError("開始日は今日以降の日付を選択してください")
    if end < start:
        raise InvalidRequestError("終了日は開始日以降の日付を選択してください")
    if (end - start).days > MAX_TRIP_SPAN_DAYS:
        raise InvalidRequestError("旅行期間は1年以内にしてください")


def missing_plan_fields(payload: Dict[str, Any]) -> List[str]:
    missing = [name for name in _PLAN_REQUIRED_FIELDS if payload.get(name) in (None, "")]
    if not str(payload.get("destination") or "").strip() and not payload.get("aiSuggestDestination"):
        missing.insert(0, "destination")
    return missing


def require_plan_fields(payload: Dict[str, Any]) -> None:
    missing = missing_plan_fields(payload)
    if missing:
        raise InvalidRequestError(f"必須項目が不足しています: {', '.join(missing)}")
