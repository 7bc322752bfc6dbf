"""In-memory travel store used when no hosted database is configured."""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from travel_planner.errors import TravelNotFoundError
from travel_planner.fallback import split_budget
from travel_planner.schemas import Travel, TravelCreate, TravelUpdate
from travel_planner.validation import validate_travel_dates

DESTINATION_IMAGES: Dict[str, str] = {
    "沖縄": "https://images.pexels.com/photos/1583884/pexels-photo-1583884.jpeg?auto=compress&cs=tinysrgb&w=600",
    "京都": "https://images.pexels.com/photos/2070033/pexels-photo-2070033.jpeg?auto=compress&cs=tinysrgb&w=600",
    "北海道": "https://images.pexels.com/photos/358457/pexels-photo-358457.jpeg?auto=compress&cs=tinysrgb&w=600",
    "東京": "https://images.pexels.com/photos/2506923/pexels-photo-2506923.jpeg?auto=compress&cs=tinysrgb&w=600",
}
DEFAULT_IMAGE = "https://images.pexels.com/photos/1008155/pexels-photo-1008155.jpeg?auto=compress&cs=tinysrgb&w=600"


def destination_image(destination: str) -> str:
    return DESTINATION_IMAGES.get(destination, DEFAULT_IMAGE)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _period_fields(start, end) -> Dict[str, str]:
    days = (end - start).days + 1
    return {
        "duration": f"{days - 1}泊{days}日",
        "dates": f"{start.isoformat()} - {end.isoformat()}",
    }


class TravelStore:
    """Newest-first list of travels with a monotonically increasing id counter."""

    def __init__(self) -> None:
        self._travels: List[Travel] = []
        self._next_id = 1

    def list(self) -> List[Travel]:
        return list(self._travels)

    def get(self, travel_id: str) -> Travel:
        for travel in self._travels:
            if travel.id == travel_id:
                return travel
        raise TravelNotFoundError(travel_id)

    def create(self, payload: TravelCreate) -> Travel:
        now = _now()
        travel = Travel(
            id=str(self._next_id),
            title=payload.title,
            destination=payload.destination,
            start_date=payload.start_date,
            end_date=payload.end_date,
            description=payload.description,
            image=destination_image(payload.destination),
            status="planning",
            member_count=payload.member_count,
            budget=payload.budget,
            interests=payload.interests,
            travel_style=payload.travel_style or "balanced",
            schedule=payload.schedule,
            places=payload.places,
            budget_breakdown=payload.budget_breakdown or split_budget(payload.budget),
            created_at=now,
            updated_at=now,
            **_period_fields(payload.start_date, payload.end_date),
        )
        self._travels.insert(0, travel)
        self._next_id += 1
        return travel

    def update(self, travel_id: str, changes: TravelUpdate, *, today: Optional[date] = None) -> Travel:
        """Shallow-merge ``changes`` into the stored travel.

        The merged date range is checked whenever either date changes; ``today``
        only applies when the start date itself is moved.
        """
        current = self.get(travel_id)
        updates = changes.model_dump(exclude_unset=True)
        merged = current.model_copy(update=updates)
        if "start_date" in updates or "end_date" in updates:
            validate_travel_dates(
                merged.start_date,
                merged.end_date,
                today=today if "start_date" in updates else None,
            )
            updates.update(_period_fields(merged.start_date, merged.end_date))
        if "destination" in updates:
            updates["image"] = destination_image(merged.destination)
        updates["updated_at"] = _now()
        updated = Travel.model_validate({**current.model_dump(), **updates})
        index = self._travels.index(current)
        self._travels[index] = updated
        return updated

    def delete(self, travel_id: str) -> None:
        self._travels.remove(self.get(travel_id))
