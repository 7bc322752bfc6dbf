"""Best-effort JSON extraction from free-text model replies.

Extraction is an ordered list of strategies. Each strategy either returns the
candidate JSON text it located or ``None``; the first candidate found is parsed
and a parse failure is final. Nothing here checks the shape of the result.
"""
from __future__ import annotations

import json
import re
from typing import Any, Optional, Protocol, Sequence

from travel_planner.errors import ParseError

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
_CLOSERS = {"{": "}", "[": "]"}


class ExtractionStrategy(Protocol):
    name: str

    def find(self, text: str) -> Optional[str]:
        ...


class FencedJsonBlock:
    """Contents of the first ```json fenced block."""

    name = "fenced_block"

    def find(self, text: str) -> Optional[str]:
        match = _FENCED_JSON.search(text)
        return match.group(1) if match else None


class DelimitedSpan:
    """First top-level ``{...}`` or ``[...]`` span, matched by bracket depth.

    Brackets inside JSON string literals are ignored. An opener that never
    closes, or whose span is not valid JSON (a prose note such as
    ``[注意]``), is skipped and the scan continues from the next opener.
    """

    name = "delimited_span"

    def find(self, text: str) -> Optional[str]:
        start = 0
        while True:
            opener = _first_opener(text, start)
            if opener < 0:
                return None
            end = _matching_close(text, opener)
            if end is not None and _is_json(text[opener : end + 1]):
                return text[opener : end + 1]
            start = opener + 1


class WholeText:
    name = "whole_text"

    def find(self, text: str) -> Optional[str]:
        return text


DEFAULT_STRATEGIES: Sequence[ExtractionStrategy] = (FencedJsonBlock(), DelimitedSpan(), WholeText())


def _is_json(candidate: str) -> bool:
    try:
        json.loads(candidate)
    except json.JSONDecodeError:
        return False
    return True


def _first_opener(text: str, start: int) -> int:
    positions = [pos for pos in (text.find("{", start), text.find("[", start)) if pos >= 0]
    return min(positions) if positions else -1


def _matching_close(text: str, opener: int) -> Optional[int]:
    stack = [_CLOSERS[text[opener]]]
    in_string = False
    escaped = False
    for idx in range(opener + 1, len(text)):
        ch = text[idx]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            stack.append(_CLOSERS[ch])
        elif ch in ("}", "]"):
            if ch != stack[-1]:
                return None
            stack.pop()
            if not stack:
                return idx
    return None


def find_candidate(text: str, strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES) -> tuple[str, str]:
    """Return ``(strategy_name, candidate_text)`` for the first strategy that matches."""
    for strategy in strategies:
        candidate = strategy.find(text)
        if candidate is not None:
            return strategy.name, candidate
    raise ParseError("No JSON candidate found in model response")


def extract_json(text: str, strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES) -> Any:
    """Locate and parse the JSON payload embedded in ``text``."""
    strategy_name, candidate = find_candidate(text or "", strategies)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON from model ({strategy_name}): {exc.msg}") from exc
