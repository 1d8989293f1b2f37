import json

import pytest

from nourishplate.core.errors import SNIPPET_LIMIT, SanitizeFailure
from nourishplate.services.response_sanitizer import parse_model_json, repair_json_text, sanitize_response


def _sample_plan() -> dict:
    return {
        "title": "Plan for Mia",
        "description": "Three easy days",
        "daily_plans": [{"day": 1, "breakfast": {"name": "Oatmeal", "calories": 280, "allergens": ["milk"]}}],
    }


def test_recovers_fenced_json_with_surrounding_prose():
    payload = _sample_plan()
    raw = "Sure! Here is the plan you asked for:\n```json\n" + json.dumps(payload, indent=2) + "\n```\nEnjoy the meals!"

    assert json.loads(sanitize_response(raw)) == payload
    assert parse_model_json(raw) == payload


def test_recovers_bare_fence_and_prose_without_fence():
    payload = _sample_plan()
    fenced = "```\n" + json.dumps(payload) + "\n```"
    prose = "Plan follows. " + json.dumps(payload) + " Let me know if you need changes."

    assert parse_model_json(fenced) == payload
    assert parse_model_json(prose) == payload


def test_trailing_prose_with_braces_is_ignored():
    payload = {"title": "T", "description": "D", "daily_plans": []}
    raw = json.dumps(payload) + "\nNote: {portions} scale with age."

    assert parse_model_json(raw) == payload


def test_repairs_unquoted_keys_and_single_quoted_values():
    raw = "{title: 'Week of Wraps', description: 'Lunchbox ideas', days: 3, tags: ['easy', 'quick'],}"

    value = parse_model_json(raw)

    assert value == {
        "title": "Week of Wraps",
        "description": "Lunchbox ideas",
        "days": 3,
        "tags": ["easy", "quick"],
    }


def test_repair_collapses_raw_newlines_and_tabs_inside_strings():
    raw = '{"name": "Veggie\nWrap", "description": "Roll\tand slice"}'

    value = parse_model_json(raw)

    assert value == {"name": "Veggie Wrap", "description": "Roll and slice"}


def test_repair_strips_trailing_commas():
    repaired = repair_json_text('{"a": [1, 2, ], "b": {"c": 1, }, }')

    assert json.loads(repaired) == {"a": [1, 2], "b": {"c": 1}}


def test_repair_leaves_key_like_text_inside_single_quoted_values_alone():
    value = parse_model_json("{title: 'Lunch, note: pack cold', description: 'x'}")

    assert value == {"title": "Lunch, note: pack cold", "description": "x"}


def test_trailing_comma_repair_keeps_colon_text_in_double_quoted_values():
    raw = '{"title": "Plan", "description": "Quick meals, ideal: school days", "daily_plans": [],}'

    value = parse_model_json(raw)

    assert value["description"] == "Quick meals, ideal: school days"
    assert value["daily_plans"] == []


def test_repair_keeps_commas_before_brackets_inside_strings():
    repaired = repair_json_text("{tip: 'Serve warm, ]not cold', 'note': \"Mia's pick, }\",}")

    assert json.loads(repaired) == {"tip": "Serve warm, ]not cold", "note": "Mia's pick, }"}


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_input_fails(raw):
    with pytest.raises(SanitizeFailure):
        sanitize_response(raw)


def test_text_without_object_fails():
    with pytest.raises(SanitizeFailure) as excinfo:
        sanitize_response("I'm sorry, I can't create a meal plan right now.")

    assert "No JSON object" in excinfo.value.errors[0]


def test_unrepairable_text_reports_both_errors_and_truncated_snippet():
    raw = "{" + '"broken": [' * 200 + "}"

    with pytest.raises(SanitizeFailure) as excinfo:
        sanitize_response(raw)

    failure = excinfo.value
    assert len(failure.errors) == 2
    assert failure.errors[0].startswith("strict parse:")
    assert failure.errors[1].startswith("after repair:")
    assert len(failure.snippet) <= SNIPPET_LIMIT
