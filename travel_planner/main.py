from __future__ import annotations

import logging
import os
from datetime import date
from typing import Any, Dict, List

from fastapi import Body, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from travel_planner.config import Settings
from travel_planner.errors import InvalidRequestError, TravelNotFoundError
from travel_planner.llm import ModelClient
from travel_planner.planner import (
    CompletionClient,
    extract_names_from_image,
    generate_recommendations,
    generate_travel_plan,
)
from travel_planner.schemas import (
    ExtractNamesRequest,
    PlanRequest,
    RecommendationRequest,
    TravelCreate,
    TravelUpdate,
)
from travel_planner.store import TravelStore
from travel_planner.validation import require_plan_fields, validate_travel_dates

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
_level = os.getenv("TRAVEL_PLANNER_LOG_LEVEL", "INFO").upper()
logger.setLevel(getattr(logging, _level, logging.INFO))
logger.propagate = False

FALLBACK_PLAN_MESSAGE = "AIプラン生成に失敗しましたが、基本的なプランを提供します"

settings = Settings.from_env()
model_client = ModelClient(settings)
travel_store = TravelStore()

app = FastAPI(title="Travel Planner API")

# Vite dev servers and static builds call the API from another origin; scope
# this with TRAVEL_PLANNER_ALLOWED_ORIGINS in deployed environments.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_model_client() -> CompletionClient:
    return model_client


def get_travel_store() -> TravelStore:
    return travel_store


def _validated(model, payload: Dict[str, Any]):
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.errors(include_url=False)) from exc


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json")


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok", "message": "Travel Planner API is running"}


@app.get("/api/travels")
async def list_travels(store: TravelStore = Depends(get_travel_store)) -> List[Dict[str, Any]]:
    return [_dump(travel) for travel in store.list()]


@app.get("/api/travels/{travel_id}")
async def get_travel(travel_id: str, store: TravelStore = Depends(get_travel_store)) -> Dict[str, Any]:
    try:
        return _dump(store.get(travel_id))
    except TravelNotFoundError as exc:
        raise HTTPException(status_code=404, detail="旅行が見つかりません") from exc


@app.post("/api/travels", status_code=201)
async def create_travel(
    payload: Dict[str, Any] = Body(...),
    store: TravelStore = Depends(get_travel_store),
) -> Dict[str, Any]:
    request = _validated(TravelCreate, payload)
    try:
        validate_travel_dates(request.start_date, request.end_date, today=date.today())
    except InvalidRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    travel = store.create(request)
    logger.info("Created travel %s to %s", travel.id, travel.destination)
    return _dump(travel)


@app.put("/api/travels/{travel_id}")
async def update_travel(
    travel_id: str,
    payload: Dict[str, Any] = Body(...),
    store: TravelStore = Depends(get_travel_store),
) -> Dict[str, Any]:
    changes = _validated(TravelUpdate, payload)
    try:
        return _dump(store.update(travel_id, changes, today=date.today()))
    except TravelNotFoundError as exc:
        raise HTTPException(status_code=404, detail="旅行が見つかりません") from exc
    except InvalidRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.errors(include_url=False)) from exc


@app.delete("/api/travels/{travel_id}")
async def delete_travel(travel_id: str, store: TravelStore = Depends(get_travel_store)) -> Dict[str, str]:
    try:
        store.delete(travel_id)
    except TravelNotFoundError as exc:
        raise HTTPException(status_code=404, detail="旅行が見つかりません") from exc
    return {"message": "旅行が削除されました"}


@app.post("/api/travels/generate-plan")
async def generate_plan(
    payload: Dict[str, Any] = Body(...),
    client: CompletionClient = Depends(get_model_client),
) -> Dict[str, Any]:
    """Generate an itinerary; AI failures still answer 200 with a fallback plan."""
    try:
        require_plan_fields(payload)
        request: PlanRequest = _validated(PlanRequest, payload)
        validate_travel_dates(request.start_date, request.end_date)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        result = await run_in_threadpool(generate_travel_plan, request, client)
    except Exception as exc:
        logger.exception("Unexpected error while generating plan")
        raise HTTPException(status_code=500, detail=f"AIプラン生成に失敗しました: {exc}") from exc

    if not result.fallback:
        return {"success": True, "plan": result.plan}
    return {
        "success": True,
        "plan": result.plan,
        "message": FALLBACK_PLAN_MESSAGE,
        "error": result.error,
    }


@app.post("/api/travels/ai/recommend")
async def recommend(
    payload: Dict[str, Any] = Body(...),
    client: CompletionClient = Depends(get_model_client),
) -> Dict[str, Any]:
    request: RecommendationRequest = _validated(RecommendationRequest, payload)
    try:
        result = await run_in_threadpool(generate_recommendations, request, client)
    except Exception as exc:
        logger.exception("Unexpected error while generating recommendations")
        raise HTTPException(status_code=500, detail=f"AI推薦生成に失敗しました: {exc}") from exc

    response: Dict[str, Any] = {"success": result.success, "recommendations": result.recommendations}
    if result.error:
        response["error"] = result.error
    return response


@app.post("/api/travels/extract-names-from-image")
async def extract_names(payload: Dict[str, Any] = Body(...)) -> Dict[str, List[str]]:
    request: ExtractNamesRequest = _validated(ExtractNamesRequest, payload)
    if not request.image_base64:
        raise HTTPException(status_code=400, detail="画像データがありません")
    return {"names": extract_names_from_image(request.image_base64)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("travel_planner.main:app", host=settings.host, port=settings.port)
