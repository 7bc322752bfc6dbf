from datetime import date

import pytest

from travel_planner.errors import InvalidRequestError, TravelNotFoundError
from travel_planner.store import DEFAULT_IMAGE, TravelStore
from travel_planner.schemas import TravelCreate, TravelUpdate


def _create(store: TravelStore, **overrides):
    payload = {
        "title": "春の京都",
        "destination": "京都",
        "startDate": "2030-04-01",
        "endDate": "2030-04-03",
        "memberCount": 3,
        "budget": 90000,
    }
    payload.update(overrides)
    return store.create(TravelCreate.model_validate(payload))


def test_create_derives_period_image_and_budget():
    travel = _create(TravelStore())

    assert travel.id == "1"
    assert travel.duration == "2泊3日"
    assert travel.dates == "2030-04-01 - 2030-04-03"
    assert "2070033" in travel.image
    assert travel.status == "planning"
    assert travel.budget_breakdown.model_dump() == {
        "transportation": 27000,
        "accommodation": 36000,
        "food": 18000,
        "activities": 9000,
    }


def test_list_is_newest_first_with_increasing_ids():
    store = TravelStore()
    _create(store, title="first")
    _create(store, title="second", destination="パリ")

    travels = store.list()
    assert [t.title for t in travels] == ["second", "first"]
    assert [t.id for t in travels] == ["2", "1"]
    assert travels[0].image == DEFAULT_IMAGE


def test_ids_are_not_reused_after_delete():
    store = TravelStore()
    first = _create(store)
    store.delete(first.id)
    assert _create(store).id == "2"


def test_update_merges_and_recomputes_period():
    store = TravelStore()
    travel = _create(store)

    updated = store.update(
        travel.id,
        TravelUpdate.model_validate({"endDate": "2030-04-05", "status": "confirmed"}),
    )

    assert updated.end_date == date(2030, 4, 5)
    assert updated.duration == "4泊5日"
    assert updated.status == "confirmed"
    assert updated.title == travel.title
    assert store.get(travel.id) == updated


def test_update_rejects_start_moved_past_existing_end():
    store = TravelStore()
    travel = _create(store)

    with pytest.raises(InvalidRequestError, match="終了日"):
        store.update(travel.id, TravelUpdate.model_validate({"startDate": "2030-04-06"}))

    assert store.get(travel.id) == travel
    assert travel.duration == "2泊3日"


def test_update_rejects_end_moved_beyond_a_year():
    store = TravelStore()
    travel = _create(store)

    with pytest.raises(InvalidRequestError):
        store.update(travel.id, TravelUpdate.model_validate({"endDate": "2031-04-02"}))


def test_update_checks_today_only_when_start_moves():
    store = TravelStore()
    travel = _create(store)
    later = date(2030, 4, 2)

    updated = store.update(travel.id, TravelUpdate.model_validate({"endDate": "2030-04-04"}), today=later)
    assert updated.duration == "3泊4日"

    with pytest.raises(InvalidRequestError):
        store.update(travel.id, TravelUpdate.model_validate({"startDate": "2030-04-01"}), today=later)


def test_unknown_ids_raise():
    store = TravelStore()
    with pytest.raises(TravelNotFoundError):
        store.get("404")
    with pytest.raises(TravelNotFoundError):
        store.delete("404")
