"""Regression tests for JSON extraction from free-text model replies."""

import pytest

from travel_planner.errors import ParseError
from travel_planner.extraction import (
    DelimitedSpan,
    FencedJsonBlock,
    WholeText,
    extract_json,
    find_candidate,
)


def test_fenced_block_is_unwrapped():
    text = 'Here is your plan:\n```json\n{"a":1}\n```\nEnjoy!'
    assert extract_json(text) == {"a": 1}


def test_bare_object_parses_the_same_as_fenced():
    assert extract_json('{"a":1}') == {"a": 1}


def test_object_embedded_in_prose_is_found():
    text = 'Sure! {"schedule": [], "note": "use {braces} freely"} Let me know.'
    assert extract_json(text) == {"schedule": [], "note": "use {braces} freely"}


def test_array_reply_is_found_for_recommendations():
    text = '推薦リストです:\n[{"name": "金閣寺", "rating": 4.8}, {"name": "清水寺"}]\n以上です。'
    assert extract_json(text) == [{"name": "金閣寺", "rating": 4.8}, {"name": "清水寺"}]


def test_fenced_block_wins_over_earlier_braces():
    text = 'Template {like this}\n```json\n[1, 2]\n```'
    strategy, candidate = find_candidate(text)
    assert strategy == "fenced_block"
    assert extract_json(text) == [1, 2]


def test_unclosed_opener_is_skipped():
    text = 'oops { then {"ok": true}'
    assert DelimitedSpan().find(text) == '{"ok": true}'


def test_whole_text_is_the_last_resort():
    strategy, candidate = find_candidate("42")
    assert strategy == "whole_text"
    assert extract_json("42") == 42


def test_invalid_fenced_json_raises_parse_error():
    with pytest.raises(ParseError):
        extract_json("```json\n{not json}\n```")


def test_prose_without_json_raises_parse_error():
    with pytest.raises(ParseError):
        extract_json("申し訳ありませんが、プランを作成できませんでした。")


def test_wrong_shape_is_accepted_silently():
    assert extract_json('{"unexpected": "shape"}') == {"unexpected": "shape"}


def test_custom_strategy_order_is_respected():
    text = 'prefix {"a": 1}'
    with pytest.raises(ParseError):
        extract_json(text, strategies=[FencedJsonBlock(), WholeText()])
    assert extract_json(text, strategies=[DelimitedSpan()]) == {"a": 1}


def test_bracketed_prose_note_before_the_object_is_skipped():
    text = '[注意] 価格は目安です。\n{"schedule": [], "budget": {}}'
    assert DelimitedSpan().find(text) == '{"schedule": [], "budget": {}}'
    assert extract_json(text) == {"schedule": [], "budget": {}}


def test_braced_placeholder_before_the_array_is_skipped():
    text = '候補は {destination} 周辺です: [{"name": "伏見稲荷大社"}]'
    assert extract_json(text) == [{"name": "伏見稲荷大社"}]
