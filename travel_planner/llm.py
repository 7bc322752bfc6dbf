# travel_planner/llm.py
import os
import logging
from typing import Optional

import openai
from openai import OpenAI

from travel_planner.config import Settings
from travel_planner.errors import ConfigurationError, NetworkError

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
_level = os.getenv("TRAVEL_PLANNER_LOG_LEVEL", "INFO").upper()
logger.setLevel(getattr(logging, _level, logging.INFO))
logger.propagate = False


class ModelClient:
    """Thin wrapper over an OpenAI-compatible chat completions endpoint.

    The SDK client is only built on the first ``complete`` call so the service
    can boot (and serve fallback plans) without a configured key. Two threads
    racing through the first call may each build a client; both point at the
    same credential so the duplicate is simply discarded.
    """

    def __init__(self, settings: Settings, *, temperature: float = 0.7):
        self.settings = settings
        self.temperature = temperature
        self._client: Optional[OpenAI] = None

    @property
    def model(self) -> str:
        return self.settings.model

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self.settings.api_key:
                raise ConfigurationError("GEMINI_API_KEY is not defined")
            logger.info("Initialising model client for %s", self.settings.model_base_url)
            self._client = OpenAI(
                api_key=self.settings.api_key,
                base_url=self.settings.model_base_url,
                timeout=self.settings.model_timeout,
                max_retries=0,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        """Send a single-turn prompt and return the raw completion text."""
        client = self._get_client()
        logger.info("Invoking model %s (%d prompt chars)", self.model, len(prompt))
        try:
            resp = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
        except openai.APIStatusError as exc:
            raise NetworkError(f"{exc.status_code} {exc.message}") from exc
        except openai.APIError as exc:
            # Connection failures and timeouts carry no status code.
            raise NetworkError(str(exc)) from exc

        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""
