"""Process configuration loaded from the environment (and a local .env file)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_MODEL_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL_TIMEOUT = 30.0


def _parse_origins(raw: str | None) -> List[str]:
    origins = [origin.strip() for origin in (raw or "*").split(",") if origin.strip()]
    return origins or ["*"]


def _parse_float(raw: str | None, default: float) -> float:
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _parse_int(raw: str | None, default: int) -> int:
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    model_base_url: str = DEFAULT_MODEL_BASE_URL
    model_timeout: float = DEFAULT_MODEL_TIMEOUT
    allowed_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 5000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``os.environ``; missing values fall back to defaults."""
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("TRAVEL_PLANNER_MODEL") or DEFAULT_MODEL,
            model_base_url=os.getenv("TRAVEL_PLANNER_MODEL_BASE_URL") or DEFAULT_MODEL_BASE_URL,
            model_timeout=_parse_float(os.getenv("TRAVEL_PLANNER_MODEL_TIMEOUT"), DEFAULT_MODEL_TIMEOUT),
            allowed_origins=tuple(_parse_origins(os.getenv("TRAVEL_PLANNER_ALLOWED_ORIGINS"))),
            host=os.getenv("TRAVEL_PLANNER_HOST") or "0.0.0.0",
            port=_parse_int(os.getenv("TRAVEL_PLANNER_PORT"), 5000),
        )
