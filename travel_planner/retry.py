"""Fixed-delay retry for transient "model overloaded" failures."""
from __future__ import annotations

import logging
import os
import time
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
_level = os.getenv("TRAVEL_PLANNER_LOG_LEVEL", "INFO").upper()
logger.setLevel(getattr(logging, _level, logging.INFO))
logger.propagate = False

T = TypeVar("T")

MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 3.0
OVERLOAD_MARKERS = ("503", "overloaded")


def is_overloaded(exc: BaseException) -> bool:
    message = str(exc)
    return any(marker in message for marker in OVERLOAD_MARKERS)


def call_with_overload_retry(
    fn: Callable[[], T],
    *,
    max_attempts: int = MAX_ATTEMPTS,
    delay_seconds: float = RETRY_DELAY_SECONDS,
    sleep: Optional[Callable[[float], None]] = None,
) -> T:
    """Run ``fn`` until it succeeds, retrying only overload errors.

    Non-overload errors and the error of the final attempt propagate unchanged.
    """
    attempt = 1
    while True:
        try:
            return fn()
        except Exception as exc:
            if attempt >= max_attempts or not is_overloaded(exc):
                raise
            logger.warning(
                "Model overloaded; retrying in %.0fs (attempt %d/%d): %s",
                delay_seconds,
                attempt,
                max_attempts,
                exc,
            )
            (sleep or time.sleep)(delay_seconds)
            attempt += 1
